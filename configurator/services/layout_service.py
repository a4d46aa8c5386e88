"""High-level layout service — facade for the API layer."""

from __future__ import annotations
import hashlib
import logging
from collections import OrderedDict

from configurator.models import (
    Building, BuildingDimensions, BuildingLayout, LayoutParams, GenerationConfig,
    RoofGeometry, Transform, WallFeature,
)
from configurator.core.generator import LayoutGenerator
from configurator.core.placement import resolve_feature
from configurator.core.registry import RuleRegistry, create_default_registry
from configurator.core.solver import solve_roof

logger = logging.getLogger(__name__)


def layout_key(building: Building, params: LayoutParams, config: GenerationConfig) -> str:
    """Cache key: digest of the canonical JSON of every layout input."""
    payload = "|".join(
        m.model_dump_json() for m in (building, params, config)
    )
    return hashlib.sha256(payload.encode()).hexdigest()


class LayoutService:
    """Delegates to the generator and memoizes layouts by input hash.

    Layouts are pure functions of their inputs. The cache keeps its own
    copy and hands out deep copies, so callers may edit what they get.
    """

    def __init__(self, registry: RuleRegistry | None = None, cache_size: int = 128) -> None:
        self.registry = registry or create_default_registry()
        self.generator = LayoutGenerator(self.registry)
        self.cache_size = cache_size
        self._cache: OrderedDict[str, BuildingLayout] = OrderedDict()

    def generate(
        self,
        building: Building,
        params: LayoutParams | None = None,
        config: GenerationConfig | None = None,
    ) -> BuildingLayout:
        if params is None:
            params = LayoutParams()
        if config is None:
            config = GenerationConfig()

        key = layout_key(building, params, config)
        cached = self._cache.get(key)
        if cached is not None:
            self._cache.move_to_end(key)
            logger.debug("layout cache hit %s", key[:12])
            return cached.model_copy(deep=True)

        layout = self.generator.generate(building, params, config)
        if self.cache_size > 0:
            self._cache[key] = layout.model_copy(deep=True)
            while len(self._cache) > self.cache_size:
                self._cache.popitem(last=False)
        return layout

    def roof(self, dimensions: BuildingDimensions) -> RoofGeometry:
        return solve_roof(dimensions)

    def place_feature(
        self,
        dimensions: BuildingDimensions,
        feature: WallFeature,
        params: LayoutParams | None = None,
    ) -> Transform:
        params = params or LayoutParams()
        return resolve_feature(feature, dimensions, params.feature_clearance)

    def clear_cache(self) -> None:
        self._cache.clear()

    def list_rules(self) -> list[dict[str, str]]:
        return [r.describe() for r in self.registry.list_rules()]
