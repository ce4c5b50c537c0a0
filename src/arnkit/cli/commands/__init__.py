from .build import build
from .parse import parse
from .root import root
from .services import services
from .substitute import substitute
from .validate import validate

__all__ = ["build", "parse", "root", "services", "substitute", "validate"]
