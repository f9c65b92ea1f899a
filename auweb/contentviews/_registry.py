from __future__ import annotations

import logging
import typing
from collections.abc import Mapping

from auweb.contentviews._api import Contentview
from auweb.mime import MimeKind

logger = logging.getLogger(__name__)


class ContentviewRegistry(Mapping[MimeKind, Contentview]):
    def __init__(self):
        self._by_kind: dict[MimeKind, Contentview] = {}

    def register(self, instance: Contentview | type[Contentview]) -> None:
        if isinstance(instance, type):
            instance = instance()
        if instance.kind in self._by_kind:
            logger.info(f"Replacing existing {instance.kind.value} contentview.")
        self._by_kind[instance.kind] = instance

    def get_view(self, kind: MimeKind) -> Contentview:
        """
        Get the contentview for the given kind.
        Kinds without a registered view are shown as they are.
        """
        try:
            return self._by_kind[kind]
        except KeyError:
            return self._by_kind[MimeKind.DEFAULT]

    def __iter__(self) -> typing.Iterator[MimeKind]:
        return iter(self._by_kind)

    def __getitem__(self, item: MimeKind) -> Contentview:
        return self._by_kind[item]

    def __len__(self):
        return len(self._by_kind)
