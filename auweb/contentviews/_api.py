from __future__ import annotations

import typing
from abc import abstractmethod

from auweb.mime import MimeKind
from auweb.options import Options


@typing.runtime_checkable
class Contentview(typing.Protocol):
    """
    Base class for all contentviews.
    """

    kind: MimeKind
    """The kind of content this view prettifies."""

    @property
    def name(self) -> str:
        """
        The name of this contentview, e.g. "JSON".
        Inferred from the class name by default.
        """
        return type(self).__name__.removesuffix("Contentview")

    @abstractmethod
    def prettify(
        self,
        text: str,
        options: Options,
    ) -> str:
        """
        Transform raw text into human-readable output.
        May raise an exception (e.g. `ValueError`) if text cannot be prettified.
        """
