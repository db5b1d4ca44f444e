"""
lazy_transform

Compile-time rewrite of UI-component imports into lazy-loading bindings:

    import MyComp1 from "./component1";

becomes

    const MyComp1 = React.lazy(() => import("./component1"));

Components are recognized through a whole-program symbol oracle
(SymbolOraclePort); everything else in the module is left untouched.
"""

__version__ = "0.1.0"

from lazy_transform.config import FrameworkConfig, TransformOptions, TransformSettings
from lazy_transform.domain.ports import SymbolOraclePort
from lazy_transform.exceptions import (
    EmitError,
    InvalidConfigurationError,
    LazyTransformError,
    ParsingError,
    SymbolResolutionError,
)
from lazy_transform.rewrite import (
    ComponentClassifier,
    LazyComponentTransformer,
    RewritePlan,
    RewriteSynthesizer,
    create_transformer,
)

__all__ = [
    "ComponentClassifier",
    "EmitError",
    "FrameworkConfig",
    "InvalidConfigurationError",
    "LazyComponentTransformer",
    "LazyTransformError",
    "ParsingError",
    "RewritePlan",
    "RewriteSynthesizer",
    "SymbolOraclePort",
    "SymbolResolutionError",
    "TransformOptions",
    "TransformSettings",
    "create_transformer",
]
