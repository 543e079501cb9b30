"""
Utility-class emitter - one CSS class per token in a collection.

Each class binds a single CSS property to a token's variable:

    .backgroundPrimary { background-color: var(--background-primary); }
    .borderPrimary { border: 1px solid var(--border-primary); }

The variable stem follows where the collection came from, so classes
always point at variables the style-sheet emitter actually wrote.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from chuk_mcp_design.constants import BORDER_PROPERTY, ErrorMessages, Namespace, UnresolvedPolicy
from chuk_mcp_design.core.naming import class_name, variable_name
from chuk_mcp_design.core.references import (
    LiteralValue,
    Reference,
    Resolved,
    Unresolved,
    parse_value,
    resolve_collection,
)
from chuk_mcp_design.errors import UnresolvedReferenceError, UtilityConfigError
from chuk_mcp_design.models.tokens import (
    DesignSystem,
    GeneratorSettings,
    TokenCollection,
    UtilityClassSpec,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UtilityRule:
    """A single generated class rule."""

    class_name: str
    pseudo: str
    css_property: str
    variable: str

    @property
    def selector(self) -> str:
        """Class selector including any pseudo-selector."""
        return f".{self.class_name}{self.pseudo}"

    def render(self) -> str:
        """Render the rule on one line."""
        if self.css_property == BORDER_PROPERTY:
            body = f"border: 1px solid var({self.variable});"
        else:
            body = f"{self.css_property}: var({self.variable});"
        return f"{self.selector} {{ {body} }}"


@dataclass
class UtilityEmission:
    """Rules generated for one utility spec."""

    rules: list[UtilityRule] = field(default_factory=list)
    resolution: Resolved | Unresolved | None = None
    warnings: list[str] = field(default_factory=list)

    @property
    def class_names(self) -> list[str]:
        """Class names in collection order."""
        return [rule.class_name for rule in self.rules]

    def render(self) -> str:
        """Render all rules, one blank line after each."""
        return "".join(f"{rule.render()}\n\n" for rule in self.rules)


def derive_property(prefix: str) -> str:
    """
    Guess a CSS property from a utility prefix.

    Legacy behaviour, used only when ``legacy_property_fallback`` is on.
    """
    lowered = prefix.lower()
    if "background" in lowered:
        return "background-color"
    if "border" in lowered:
        return BORDER_PROPERTY
    return "color"


def resolve_property(
    spec: UtilityClassSpec,
    settings: GeneratorSettings,
    group: str | None = None,
    utility: str | None = None,
) -> str:
    """
    Get the CSS property for a utility spec.

    Raises:
        UtilityConfigError: If the property is missing and the legacy
            fallback is disabled
    """
    if spec.css_property:
        return spec.css_property
    if settings.legacy_property_fallback:
        derived = derive_property(spec.prefix)
        logger.debug("Derived property '%s' from prefix '%s'", derived, spec.prefix)
        return derived
    raise UtilityConfigError(
        ErrorMessages.MISSING_PROPERTY.format(prefix=spec.prefix),
        group=group,
        utility=utility,
    )


def _unresolved_tokens(
    reference: Reference,
    spec: UtilityClassSpec,
) -> tuple[TokenCollection, str | None]:
    """
    Tokens and stem used to emit a dangling rule for a miss.

    The rule is named after the final segment, as the historical
    generator did. For ``{semanticTokens.<group>.<category>}`` that
    segment is also the stem, so a missing ``elevation`` collection
    yields ``--elevation-elevation``: the variable the style-sheet
    emitter would write for an ``elevation`` token in that category.
    """
    namespace = reference.explicit_namespace
    if namespace == Namespace.SEMANTIC_TOKENS and len(reference.path) >= 3:
        stem: str | None = reference.path[2]
    elif namespace == Namespace.PRIMITIVES:
        stem = None
    else:
        stem = spec.prefix
    return {reference.leaf: None}, stem


def build_utility_rules(
    system: DesignSystem,
    spec: UtilityClassSpec,
    settings: GeneratorSettings | None = None,
    group: str | None = None,
    utility: str | None = None,
) -> UtilityEmission:
    """
    Build the class rules for one utility spec.

    Args:
        system: The token graph, used to resolve collection references
        spec: Utility spec
        settings: Generator settings (defaults to the system's)
        group: Utility group name, for error reporting
        utility: Utility key, for error reporting

    Returns:
        UtilityEmission with rules in collection order

    Raises:
        UtilityConfigError: Missing property in strict mode
        UnresolvedReferenceError: Miss under the 'fail' policy
    """
    settings = settings or system.settings
    css_property = resolve_property(spec, settings, group, utility)
    pseudo = spec.pseudo or ""
    emission = UtilityEmission()

    if isinstance(spec.tokens, dict):
        tokens: TokenCollection = spec.tokens
        stem: str | None = spec.prefix
    else:
        parsed = parse_value(spec.tokens)
        reference = parsed if isinstance(parsed, Reference) else Reference(path=(spec.tokens,))
        if isinstance(parsed, LiteralValue):
            logger.debug("Utility tokens %r is not a reference", spec.tokens)

        resolution = resolve_collection(system, reference)
        emission.resolution = resolution

        if isinstance(resolution, Resolved):
            tokens = resolution.tokens
            stem = resolution.variable_stem
        else:
            location = f"{group}.{utility}" if group and utility else spec.prefix
            message = (
                f"Utility '{location}': "
                f"{ErrorMessages.UNRESOLVED_COLLECTION.format(reference=reference)} "
                f"({resolution.reason})"
            )
            if settings.unresolved_policy == UnresolvedPolicy.FAIL:
                raise UnresolvedReferenceError(message, str(reference))

            emission.warnings.append(message)
            logger.warning(message)
            if settings.unresolved_policy == UnresolvedPolicy.SKIP:
                return emission
            tokens, stem = _unresolved_tokens(reference, spec)

    for key in tokens:
        emission.rules.append(
            UtilityRule(
                class_name=class_name(spec.prefix, key),
                pseudo=pseudo,
                css_property=css_property,
                variable=variable_name(key, stem),
            )
        )

    return emission


def emit_utility_css(
    system: DesignSystem,
    spec: UtilityClassSpec,
    settings: GeneratorSettings | None = None,
) -> str:
    """Emit the CSS text for one utility spec."""
    return build_utility_rules(system, spec, settings).render()
