"""
Prediction store
Keeps prediction records in process memory.

- id: random UUID4 assigned on create
- created_at: UTC timestamp assigned on create
- no update or delete of single records
"""

import threading
import uuid
from datetime import datetime, timezone
from typing import Optional

from loguru import logger

from app.schemas.results import PredictionRecord, Prediction


class StorageError(Exception):
    """A record could not be stored or read"""


class PredictionStore:
    """In-memory prediction store"""

    def __init__(self):
        self._predictions: dict[str, Prediction] = {}
        self._order: list[str] = []
        self._lock = threading.Lock()
        self.logger = logger.bind(component="PredictionStore")

    def create(self, record: PredictionRecord) -> Prediction:
        """Stores a record and returns it with its id and creation time"""
        try:
            prediction = Prediction(
                **record.model_dump(),
                id=str(uuid.uuid4()),
                created_at=datetime.now(timezone.utc),
            )
        except ValueError as e:
            raise StorageError(f"Invalid prediction record: {e}") from e

        with self._lock:
            if prediction.id in self._predictions:
                raise StorageError(f"Duplicate prediction id: {prediction.id}")
            self._predictions[prediction.id] = prediction
            self._order.append(prediction.id)

        self.logger.debug(f"Prediction saved: {prediction.id}")
        return prediction

    def get(self, prediction_id: str) -> Optional[Prediction]:
        """Looks up a prediction by id"""
        with self._lock:
            return self._predictions.get(prediction_id)

    def list_all(self) -> list[Prediction]:
        """All predictions, newest first"""
        with self._lock:
            # insertion order breaks ties between equal timestamps
            ranked = [
                (self._predictions[pid].created_at, index, self._predictions[pid])
                for index, pid in enumerate(self._order)
            ]
        ranked.sort(key=lambda x: (x[0], x[1]), reverse=True)
        return [prediction for _, _, prediction in ranked]

    def count(self) -> int:
        with self._lock:
            return len(self._predictions)

    def clear(self) -> int:
        """Removes every prediction"""
        with self._lock:
            count = len(self._predictions)
            self._predictions.clear()
            self._order.clear()
        self.logger.info(f"Store cleared: {count} predictions")
        return count


# global instance
_store: Optional[PredictionStore] = None


def get_prediction_store() -> PredictionStore:
    """Returns the shared prediction store"""
    global _store
    if _store is None:
        _store = PredictionStore()
    return _store
