"""
Startup input schemas
Structures the attributes a user enters about a startup.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

MIN_FOUNDED_YEAR = 1900
MAX_TEAM_SIZE = 10_000

# Choices offered by the UI; other values are accepted and scored neutrally.
MARKET_CATEGORIES = [
    "Software",
    "E-commerce",
    "FinTech",
    "HealthTech",
    "EdTech",
    "AI/ML",
    "Blockchain",
    "SaaS",
    "Mobile Apps",
    "Gaming",
    "Other",
]

REGIONS = [
    "North America",
    "Europe",
    "Asia",
    "South America",
    "Africa",
    "Oceania",
]


class StartupProfile(BaseModel):
    """
    Startup profile

    The attributes consumed by the scoring engine. Instances are immutable.
    market_category and location may be values outside the known lists.
    """
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    founded_year: int = Field(
        alias="foundedYear",
        ge=MIN_FOUNDED_YEAR,
        description="Year the company was founded",
        examples=[2021],
    )
    team_size: int = Field(
        alias="teamSize",
        ge=1,
        le=MAX_TEAM_SIZE,
        description="Number of people on the team",
        examples=[25],
    )
    market_category: str = Field(
        alias="marketCategory",
        min_length=1,
        description="Market category",
        examples=["AI/ML"],
    )
    location: str = Field(
        min_length=1,
        description="Region the company operates from",
        examples=["North America"],
    )
    funding_amount: float = Field(
        alias="fundingAmount",
        ge=0,
        allow_inf_nan=False,
        description="Total funding raised (USD)",
        examples=[5_000_000],
    )

    @field_validator("founded_year")
    @classmethod
    def _not_in_future(cls, value: int) -> int:
        current_year = datetime.now().year
        if value > current_year:
            raise ValueError(f"foundedYear must not be later than {current_year}")
        return value


class PredictionRequest(StartupProfile):
    """
    Create-prediction payload

    The profile plus the free-text fields used by the language model.
    """
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "startupName": "Acme Robotics",
                "foundedYear": 2021,
                "teamSize": 25,
                "marketCategory": "AI/ML",
                "location": "North America",
                "fundingAmount": 5000000,
                "description": "Warehouse robots that learn new picking tasks from a single demonstration.",
            }
        }
    )

    startup_name: str = Field(
        alias="startupName",
        min_length=1,
        description="Startup name",
    )
    description: str = Field(
        min_length=10,
        description="Free-text description of the startup",
    )

    def to_profile(self) -> StartupProfile:
        """Drop the free-text fields."""
        return StartupProfile.model_validate(
            self.model_dump(include=set(StartupProfile.model_fields))
        )
