from abc import ABC, abstractmethod
from typing import Any

from next_compat.errors import NextCompatError
from next_compat.paths import clean_escaped_chars
from next_compat.routes.models import Header, Redirect, Rewrite
from next_compat.routes.support import firebase_redirect_type


class IHostingMapper(ABC):
    @abstractmethod
    def map_rewrite(self, rewrite: Rewrite) -> dict[str, Any]:
        raise NotImplementedError

    @abstractmethod
    def map_redirect(self, redirect: Redirect) -> dict[str, Any]:
        raise NotImplementedError

    @abstractmethod
    def map_header(self, header: Header) -> dict[str, Any]:
        raise NotImplementedError


class FirebaseHostingMapper(IHostingMapper):
    """Map supported Next.js rules onto ``firebase.json`` hosting entries."""

    def map_rewrite(self, rewrite: Rewrite) -> dict[str, Any]:
        return {
            "source": clean_escaped_chars(rewrite.source),
            "destination": rewrite.destination,
        }

    def map_redirect(self, redirect: Redirect) -> dict[str, Any]:
        redirect_type = firebase_redirect_type(redirect)
        if redirect_type is None:
            raise NextCompatError(
                f"Redirect status cannot be mapped to Firebase: {redirect.source}"
            )
        return {
            "source": clean_escaped_chars(redirect.source),
            "destination": redirect.destination,
            "type": redirect_type,
        }

    def map_header(self, header: Header) -> dict[str, Any]:
        return {
            "source": clean_escaped_chars(header.source),
            "headers": [
                {"key": entry.key, "value": entry.value} for entry in header.headers
            ],
        }
