"""
Base component abstract class.

Every analysis component (classification, sentiment, similarity,
responses) inherits from this class so the API server, LangChain tools
and the orchestrator can drive them through the same interface.
"""

from abc import ABC, abstractmethod
from typing import TypeVar, Generic, Dict, Any
from pydantic import BaseModel

# Generic type variables for request/response
TRequest = TypeVar("TRequest", bound=BaseModel)
TResponse = TypeVar("TResponse", bound=BaseModel)


class BaseComponent(ABC, Generic[TRequest, TResponse]):
    """
    Abstract base class for all analysis components.

    Each component must implement:
    - process(): Main processing logic
    - health_check(): Health status check
    - component_name: Unique identifier

    Usage:
        class SentimentService(BaseComponent[SentimentRequest, SentimentResult]):
            async def process(self, request: SentimentRequest) -> SentimentResult:
                return analyze_sentiment(request.description, self.taxonomy)
    """

    @abstractmethod
    async def process(self, request: TRequest) -> TResponse:
        """
        Process a request and return a response.

        Args:
            request: Pydantic model containing input data

        Returns:
            Pydantic model containing output data

        Raises:
            ProcessingError: If processing fails
            ValidationError: If input validation fails
        """
        pass

    @abstractmethod
    async def health_check(self) -> Dict[str, Any]:
        """
        Check component health status.

        Returns:
            Dict with at least:
            - status: "healthy" | "unhealthy"
            - component: Component name
        """
        pass

    @property
    @abstractmethod
    def component_name(self) -> str:
        """
        Return unique component identifier.

        Used for logging and error reporting.
        """
        pass

    async def __call__(self, request: TRequest) -> TResponse:
        """
        Allow component to be called directly.

        Makes the component callable: response = await component(request)
        """
        return await self.process(request)
