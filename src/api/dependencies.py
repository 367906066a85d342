from litestar.datastructures import State

from services.matcher import MatcherService


def provide_matcher_service(state: State) -> MatcherService:
    matcher = state.get("matcher")
    if matcher is None:
        raise RuntimeError("Matcher service is not initialized")
    return matcher
