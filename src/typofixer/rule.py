"""Human-readable definition of the variable typo rule."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class CodeSample:
    before: str
    after: str


@dataclass(frozen=True)
class RuleDefinition:
    description: str
    samples: Tuple[CodeSample, ...]


RULE_DEFINITION = RuleDefinition(
    description="Change typo in variable",
    samples=(CodeSample(before="$previuos", after="$previous"),),
)


def describe(definition: RuleDefinition = RULE_DEFINITION) -> str:
    lines = [definition.description, ""]
    for sample in definition.samples:
        lines.append(f"- {sample.before}")
        lines.append(f"+ {sample.after}")
    return "\n".join(lines)
