#!/usr/bin/env python
"""
VentureScope prediction CLI

Usage:
    python scripts/predictions_cli.py score 2022 25 "AI/ML" "North America" 5000000 0.8
                                                # local scoring, no LLM (sentiment defaults to 0.5)
    python scripts/predictions_cli.py list      # predictions stored by the running API
    python scripts/predictions_cli.py show <id> # one stored prediction
"""

import sys
from pathlib import Path

# add the project root to the path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import httpx
from pydantic import ValidationError

from app.config import settings
from app.domain import ScoringEngine
from app.schemas import StartupProfile


def cmd_score(args: list[str]):
    """Scores a profile locally"""
    if len(args) < 5:
        print("❌ score needs: <foundedYear> <teamSize> <category> <location> <funding> [sentiment]")
        return

    try:
        profile = StartupProfile(
            founded_year=args[0],
            team_size=args[1],
            market_category=args[2],
            location=args[3],
            funding_amount=args[4],
        )
        sentiment = float(args[5]) if len(args) > 5 else 0.5
    except (ValidationError, ValueError) as e:
        print(f"❌ Invalid input: {e}")
        return

    if not 0.0 <= sentiment <= 1.0:
        print("❌ sentiment must be between 0 and 1")
        return

    result = ScoringEngine().score(profile, sentiment)

    print("=" * 40)
    print("🔮 VentureScope local score")
    print("=" * 40)
    print(f"  Success probability: {result.success_probability:.1f}%")
    print("-" * 40)
    for item in result.feature_importance:
        print(f"  {item.display_name:<12} {item.importance:6.1f}")
    print("=" * 40)


def api_get(path: str):
    with httpx.Client(base_url=settings.API_BASE_URL, timeout=settings.API_TIMEOUT) as client:
        response = client.get(path)
    response.raise_for_status()
    return response.json()


def cmd_list():
    """Lists stored predictions"""
    predictions = api_get("/predictions")

    print("=" * 72)
    print("📊 VentureScope predictions")
    print("=" * 72)

    if not predictions:
        print("  (no predictions)")
        return

    print(f"{'Created':<20} {'Startup':<20} {'Category':<12} {'Prob.':>6}  ID")
    print("-" * 72)
    for p in predictions:
        print(
            f"{p['createdAt'][:19].replace('T', ' '):<20} "
            f"{p['startupName'][:20]:<20} "
            f"{p['marketCategory'][:12]:<12} "
            f"{p['successProbability']:>5.1f}%  "
            f"{p['id']}"
        )
    print("=" * 72)


def cmd_show(prediction_id: str):
    """Prints one prediction"""
    try:
        p = api_get(f"/predictions/{prediction_id}")
    except httpx.HTTPStatusError as e:
        if e.response.status_code == 404:
            print(f"❌ Prediction not found: {prediction_id}")
            return
        raise

    print("=" * 40)
    print(f"🚀 {p['startupName']}")
    print("=" * 40)
    print(f"  Probability: {p['successProbability']:.1f}%")
    print(f"  Sentiment:   {p['sentiment']} ({p['sentimentScore']:.2f})")
    print(f"  Category:    {p['marketCategory']} / {p['location']}")
    print("-" * 40)
    for item in p["featureImportance"]:
        print(f"  {item['displayName']:<12} {item['importance']:6.1f}")
    print("-" * 40)
    for i, suggestion in enumerate(p["improvements"], 1):
        print(f"  {i}. {suggestion}")
    print("=" * 40)


def print_help():
    print(__doc__)
    print(f"API: {settings.API_BASE_URL}")


def main():
    if len(sys.argv) < 2:
        print_help()
        return

    command = sys.argv[1].lower()

    try:
        if command == "score":
            cmd_score(sys.argv[2:])
        elif command == "list":
            cmd_list()
        elif command == "show" and len(sys.argv) > 2:
            cmd_show(sys.argv[2])
        elif command in ["help", "-h", "--help"]:
            print_help()
        else:
            print(f"❌ Unknown command: {command}")
            print_help()
    except httpx.HTTPError as e:
        print(f"❌ API request failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
