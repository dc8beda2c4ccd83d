""" A client library for accessing the Wordfolio API """
from .client import AuthenticatedClient

__all__ = (
    "AuthenticatedClient",
)
