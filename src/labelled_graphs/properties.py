from __future__ import annotations

"""Label-aware forwarding of property access to the backing store."""

from typing import TYPE_CHECKING, Any, Dict, Hashable, Mapping, Tuple

from .backends.base import PropertyKey, PropertyStore
from .edge import LabelledEdge

if TYPE_CHECKING:
    from .backends.base import GraphBackend
    from .registry import LabelRegistry


class PropertyDelegationMixin:
    """
    Property accessors for LabelledGraph.

    Every accessor takes its subject as leading positional arguments:

    - ``()``                  : the graph itself
    - ``(label,)``            : a vertex
    - ``(src, dst)``          : an edge
    - ``(LabelledEdge(...),)``: an edge

    Labels are translated to indices and the call is forwarded verbatim to
    the backend's PropertyStore; missing properties, value types and merge
    rules are the store's business.
    """

    __slots__ = ()

    _registry: LabelRegistry[Any]
    _graph: GraphBackend

    def _property_store(self) -> PropertyStore:
        if not isinstance(self._graph, PropertyStore):
            raise TypeError(
                f"{type(self._graph).__name__} backend does not support properties"
            )
        return self._graph

    def _property_key(self, subject: Tuple[Hashable, ...]) -> PropertyKey:
        index_of = self._registry.index_of
        if len(subject) == 0:
            return ()
        if len(subject) == 1:
            (item,) = subject
            if isinstance(item, LabelledEdge):
                return index_of(item.src), index_of(item.dst)
            return (index_of(item),)
        if len(subject) == 2:
            src, dst = subject
            return index_of(src), index_of(dst)
        raise TypeError(f"property subject must be 0, 1 or 2 labels, got {len(subject)}")

    def get_property(self, *args: Any) -> Any:
        """get_property([subject...], prop)"""
        if not args:
            raise TypeError("get_property() requires a property name")
        *subject, prop = args
        store = self._property_store()
        return store.get_prop(self._property_key(tuple(subject)), prop)

    def set_property(self, *args: Any) -> None:
        """set_property([subject...], prop, value)"""
        if len(args) < 2:
            raise TypeError("set_property() requires a property name and a value")
        *subject, prop, value = args
        store = self._property_store()
        store.set_prop(self._property_key(tuple(subject)), prop, value)

    def get_properties(self, *subject: Any) -> Dict[str, Any]:
        """get_properties([subject...])"""
        store = self._property_store()
        return store.props(self._property_key(subject))

    def set_properties(self, *args: Any) -> None:
        """
        set_properties([subject...], values)

        ``values`` is merged into the stored properties using the store's
        rule (for MetaGraph: given keys overwrite, others are kept).
        """
        if not args:
            raise TypeError("set_properties() requires a mapping of values")
        *subject, values = args
        if not isinstance(values, Mapping):
            raise TypeError(f"values must be a mapping, got {type(values).__name__}")
        store = self._property_store()
        store.set_props(self._property_key(tuple(subject)), values)

    def has_property(self, *args: Any) -> bool:
        """has_property([subject...], prop)"""
        if not args:
            raise TypeError("has_property() requires a property name")
        *subject, prop = args
        store = self._property_store()
        return store.has_prop(self._property_key(tuple(subject)), prop)
