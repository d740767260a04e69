"""Bills of materials imported into dependency management."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict

from buildgen.exceptions import BuildModelError
from buildgen.model.container import BuilderContainer
from buildgen.model.version import VersionReference

DEFAULT_BOM_ORDER = 2**31 - 1


class BillOfMaterials(BaseModel):
    """Immutable snapshot of a BOM import.

    ``order`` states precedence: a BOM with a lower order wins over one with a
    higher order. Unordered BOMs come last.
    """

    model_config = ConfigDict(frozen=True)

    group_id: str
    artifact_id: str
    version: VersionReference | None = None
    order: int = DEFAULT_BOM_ORDER


class BomBuilder:
    def __init__(self, key: str) -> None:
        self.key = key
        self._group_id: str | None = None
        self._artifact_id: str | None = None
        self._version: VersionReference | None = None
        self._order = DEFAULT_BOM_ORDER

    def coordinates(self, group_id: str, artifact_id: str) -> BomBuilder:
        self._group_id = group_id
        self._artifact_id = artifact_id
        return self

    def version(self, version: VersionReference | str | None) -> BomBuilder:
        if isinstance(version, str):
            version = VersionReference.of_value(version)
        self._version = version
        return self

    def order(self, order: int) -> BomBuilder:
        self._order = order
        return self

    def build(self) -> BillOfMaterials:
        if not self._group_id or not self._artifact_id:
            raise BuildModelError(f"Bill of materials '{self.key}' has no coordinates")
        return BillOfMaterials(
            group_id=self._group_id,
            artifact_id=self._artifact_id,
            version=self._version,
            order=self._order,
        )


class BomContainer(BuilderContainer[BomBuilder, BillOfMaterials]):
    def __init__(self) -> None:
        super().__init__(BomBuilder)

    def add(
        self,
        key: str,
        group_id: str | None = None,
        artifact_id: str | None = None,
        version: VersionReference | str | None = None,
        order: int | None = None,
    ) -> BomBuilder:
        builder = self.customize(key)
        if group_id is not None or artifact_id is not None:
            builder.coordinates(group_id, artifact_id)
        if version is not None:
            builder.version(version)
        if order is not None:
            builder.order(order)
        return builder


def order_boms(boms: Iterable[BillOfMaterials], descending: bool = False) -> list[BillOfMaterials]:
    """Sort *boms* by order; ties keep their declaration order in both directions."""
    indexed = list(enumerate(boms))
    if descending:
        indexed.sort(key=lambda item: (-item[1].order, item[0]))
    else:
        indexed.sort(key=lambda item: (item[1].order, item[0]))
    return [bom for _, bom in indexed]
