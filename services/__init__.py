from .parsing_client import ParsingClient, resolve_bearer_token, persistent_token_store

__all__ = ["ParsingClient", "resolve_bearer_token", "persistent_token_store"]
