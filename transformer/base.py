"""Abstract base class for schedule transformers."""

from abc import ABC, abstractmethod
from typing import Any

from extractor.models import EventData


class BaseTransformer(ABC):
    """Abstract base class defining the interface for schedule transformers.
    
    Extend this class to implement transformers for different output formats
    (e.g., iCalendar, CSV, JSON, etc.).
    """
    
    @abstractmethod
    def transform(self, events: list[EventData]) -> Any:
        """Transform selected duties into the target format.
        
        Args:
            events: Duties of the selected person.
            
        Returns:
            Transformed data in the target format.
        """
        pass
    
    @abstractmethod
    def save(self, output_path: str) -> None:
        """Save the transformed data to a file.
        
        Args:
            output_path: Path to the output file.
        """
        pass
