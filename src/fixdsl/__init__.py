"""fixdsl - Fixpoint syntax trees and catamorphisms for Python 3.12+."""

import logging

from fixdsl.algebras import (
    debug,
    # Algebras
    debug_algebra,
    plain,
    plain_algebra,
    pretty,
    pretty_algebra,
)
from fixdsl.build import (
    abstract,
    apply,
    assign,
    group,
    literal,
    variable,
)
from fixdsl.config import (
    FoldSettings,
    configure,
    get_settings,
    reset_settings,
)
from fixdsl.doc import (
    DOCS,
    Doc,
    DocBuilder,
    render,
)
from fixdsl.equality import (
    structural_hash,
    structurally_equal,
)
from fixdsl.errors import (
    CyclicTreeError,
    DepthLimitError,
    FixDSLError,
)
from fixdsl.fix import Fix
from fixdsl.fold import (
    Algebra,
    cata,
)
from fixdsl.schema import (
    FieldKind,
    FieldSchema,
    VariantSchema,
    all_schemas,
    variant_schema,
)
from fixdsl.syntax import (
    Abstract,
    Apply,
    Assign,
    Group,
    Literal,
    # Node shapes
    Syntax,
    Variable,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DOCS",
    "Abstract",
    "Algebra",
    "Apply",
    "Assign",
    "CyclicTreeError",
    "DepthLimitError",
    "Doc",
    "DocBuilder",
    "FieldKind",
    "FieldSchema",
    "Fix",
    "FixDSLError",
    "FoldSettings",
    "Group",
    "Literal",
    # Node shapes
    "Syntax",
    "VariantSchema",
    "Variable",
    "abstract",
    "all_schemas",
    "apply",
    "assign",
    # Traversal
    "cata",
    "configure",
    "debug",
    "debug_algebra",
    "get_settings",
    "group",
    "literal",
    "plain",
    "plain_algebra",
    "pretty",
    "pretty_algebra",
    "render",
    "reset_settings",
    "structural_hash",
    "structurally_equal",
    "variable",
    "variant_schema",
]
