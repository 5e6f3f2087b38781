"""pixelcompare metrics — registry and lazy factory for similarity backends."""

import importlib

from pixelcompare.buffer import PixelBuffer

DEFAULT_METRIC = "weighted_rgb"

_METRIC_REGISTRY = {
    "weighted_rgb": ("pixelcompare.metrics.weighted_rgb", "WeightedRgbMetric"),
    "byte_tolerance": ("pixelcompare.metrics.byte_tolerance", "ByteToleranceMetric"),
    "ssim": ("pixelcompare.metrics.ssim", "SsimMetric"),
}

METRIC_META = {
    "weighted_rgb": {"uses_alpha": "weight", "direction": "higher_is_better"},
    "byte_tolerance": {"uses_alpha": "channel", "direction": "higher_is_better"},
    "ssim": {"uses_alpha": "ignored", "direction": "higher_is_better"},
}

_METRIC_EXTRAS = {
    "weighted_rgb": (None, None),
    "byte_tolerance": (None, None),
    "ssim": ("scikit-image", "ssim"),
}


def available_metrics() -> list[str]:
    return sorted(_METRIC_REGISTRY)


def create_metric(name: str, **kwargs):
    """Create a metric instance by name with lazy imports."""
    if name not in _METRIC_REGISTRY:
        raise ValueError(
            f"Unknown metric: {name!r}. Available: {available_metrics()}"
        )
    module_path, class_name = _METRIC_REGISTRY[name]
    try:
        module = importlib.import_module(module_path)
    except ImportError as exc:
        pkg, extra = _METRIC_EXTRAS.get(name, (None, None))
        if pkg and extra:
            from pixelcompare.errors import MissingDependencyError
            raise MissingDependencyError(pkg, extra, f"{name} metric") from exc
        raise
    cls = getattr(module, class_name)
    return cls(**kwargs)


def get_metric_meta(name: str) -> dict:
    """Return alpha handling and direction metadata for a metric."""
    if name not in METRIC_META:
        return {"uses_alpha": "ignored", "direction": "higher_is_better"}
    return METRIC_META[name]


def similarity(buf_a: PixelBuffer, buf_b: PixelBuffer) -> float:
    """Alpha-weighted RGB similarity of two equal-sized buffers, in [0, 1]."""
    from pixelcompare.metrics.weighted_rgb import WeightedRgbMetric

    return WeightedRgbMetric().compute(buf_a, buf_b)


__all__ = [
    "DEFAULT_METRIC",
    "available_metrics",
    "create_metric",
    "get_metric_meta",
    "similarity",
]
