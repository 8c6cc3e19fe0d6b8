"""
Base use case class.

Each use case encapsulates a single business operation and is independent
of HTTP. Use cases raise domain exceptions (studygenie.core.exceptions);
routes translate them into HTTP responses.

Example:
    >>> class DocumentUploadUseCase(UseCase[DocumentUploadRequest, Document]):
    ...     async def execute(self, request: DocumentUploadRequest) -> Document:
    ...         ...
"""

from abc import ABC, abstractmethod
from typing import TypeVar, Generic

RequestT = TypeVar("RequestT")
ResponseT = TypeVar("ResponseT")


class UseCase(ABC, Generic[RequestT, ResponseT]):
    """
    Base use case abstract class.

    Type Parameters:
        RequestT: Type of the input request object
        ResponseT: Type of the output response object
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        """
        Execute the use case and return a response.

        Raises:
            Domain exceptions only. HTTP exceptions are the route's
            responsibility.
        """
        pass
