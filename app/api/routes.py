"""
VentureScope API router
"""

from fastapi import APIRouter, Depends, HTTPException

from app.schemas.startup import PredictionRequest, MARKET_CATEGORIES, REGIONS
from app.schemas.results import Prediction
from app.pipeline import PredictionPipeline
from app.storage import PredictionStore, StorageError, get_prediction_store

router = APIRouter()


def get_store() -> PredictionStore:
    return get_prediction_store()


def get_pipeline(store: PredictionStore = Depends(get_store)) -> PredictionPipeline:
    return PredictionPipeline(store=store)


@router.post("/predictions", response_model=Prediction)
def create_prediction(
    request: PredictionRequest,
    pipeline: PredictionPipeline = Depends(get_pipeline),
) -> Prediction:
    """
    Create a prediction

    - analyzes the description sentiment
    - computes the success probability and feature importances
    - generates improvement suggestions
    - stores and returns the full record
    """
    try:
        return pipeline.run(request)
    except StorageError as e:
        raise HTTPException(status_code=500, detail=f"Failed to store prediction: {e}")


@router.get("/predictions/{prediction_id}", response_model=Prediction)
def get_prediction(
    prediction_id: str,
    store: PredictionStore = Depends(get_store),
) -> Prediction:
    """Fetch one prediction"""
    try:
        prediction = store.get(prediction_id)
    except StorageError as e:
        raise HTTPException(status_code=500, detail=f"Failed to retrieve prediction: {e}")

    if prediction is None:
        raise HTTPException(status_code=404, detail="Prediction not found")
    return prediction


@router.get("/predictions", response_model=list[Prediction])
def list_predictions(store: PredictionStore = Depends(get_store)) -> list[Prediction]:
    """All predictions, newest first"""
    try:
        return store.list_all()
    except StorageError as e:
        raise HTTPException(status_code=500, detail=f"Failed to retrieve predictions: {e}")


@router.get("/options")
async def get_options():
    """Market categories and regions offered by the form"""
    return {
        "market_categories": MARKET_CATEGORIES,
        "regions": REGIONS,
    }


@router.get("/schema/prediction-request")
async def get_prediction_request_schema():
    """JSON schema of the create-prediction payload"""
    return PredictionRequest.model_json_schema()
