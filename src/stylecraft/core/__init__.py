"""
Stylecraft compilation core.

- store: theme variable partitions and default-value counters
- variables: theme / component variable collection
- optimizer: default-value hoisting and var() rewriting
- compiler: style config to CSS
- dedupe: identical-rule merging
- generate: variable blocks and final assembly
- cache: generated CSS memoization
"""

from .cache import NEEDS_STYLES, CssCache
from .compiler import (
    StyleConfigCompiler,
    compile_style_config,
    create_selector,
    format_value,
    is_property_value,
    split_selector_list,
    to_kebab_case,
)
from .dedupe import combine_identical_rules, normalize_blank_lines
from .generate import assemble_css, generate_dark_variables, generate_root_variables
from .optimizer import DefaultValueOptimizer, VarReference, iter_var_references
from .store import DefaultValueTable, ThemeVariableStore
from .variables import VariableCollector

__all__ = [
    # Store
    "ThemeVariableStore",
    "DefaultValueTable",
    # Variables
    "VariableCollector",
    # Optimizer
    "DefaultValueOptimizer",
    "VarReference",
    "iter_var_references",
    # Compiler
    "StyleConfigCompiler",
    "compile_style_config",
    "create_selector",
    "format_value",
    "is_property_value",
    "split_selector_list",
    "to_kebab_case",
    # Dedupe
    "combine_identical_rules",
    "normalize_blank_lines",
    # Generation
    "assemble_css",
    "generate_root_variables",
    "generate_dark_variables",
    # Cache
    "CssCache",
    "NEEDS_STYLES",
]
