# Role: Shared backend singletons. Routes receive the responder through Depends(get_responder),
# so tests can swap it with app.dependency_overrides.

from backend.core.concierge import ConciergeResponder

concierge_responder = ConciergeResponder()


def get_responder() -> ConciergeResponder:
    return concierge_responder
