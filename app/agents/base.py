"""
Agent base class
Abstract base that every agent inherits from.
"""

import time
from abc import ABC, abstractmethod
from typing import TypeVar, Generic
from loguru import logger

InputT = TypeVar("InputT")
OutputT = TypeVar("OutputT")


class BaseAgent(ABC, Generic[InputT, OutputT]):
    """
    Agent base class

    - input and output types are explicit
    - errors are logged and re-raised in one place
    """

    name: str = "BaseAgent"

    def __init__(self):
        self.logger = logger.bind(agent=self.name)

    def run(self, input_data: InputT) -> OutputT:
        """
        Runs the agent.

        Args:
            input_data: agent input

        Returns:
            agent output
        """
        started = time.perf_counter()
        try:
            self._validate_input(input_data)
            result = self._process(input_data)
            self._validate_output(result)
        except Exception as e:
            self.logger.error(f"{self.name} error: {e}")
            raise

        self.logger.debug(
            f"{self.name} finished in {(time.perf_counter() - started) * 1000:.0f}ms"
        )
        return result

    @abstractmethod
    def _process(self, input_data: InputT) -> OutputT:
        """Actual work (implemented by subclasses)"""

    def _validate_input(self, input_data: InputT) -> None:
        """Input check (override when needed)"""
        if input_data is None:
            raise ValueError(f"{self.name}: input is None")

    def _validate_output(self, output_data: OutputT) -> None:
        """Output check (override when needed)"""
        if output_data is None:
            raise ValueError(f"{self.name}: output is None")
