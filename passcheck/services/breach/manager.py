from passcheck.services.breach.base import BreachClient
from passcheck.services.breach.hibp_provider import HIBPRangeClient


def get_breach_client() -> BreachClient:
    """
    Returns a new client per call, configured from the environment.
    """
    return HIBPRangeClient()
