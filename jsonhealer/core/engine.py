"""
Repair engine for jsonhealer - runs the transformation pipeline until the text
is valid JSON.
"""

import json
import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, NoReturn, Optional, Union

from ..preprocessing.balancer import BracketBalancer, count_brackets
from ..preprocessing.pipeline import TransformationLike, TransformationPipeline
from ..utils.config import HealConfig, coerce_config
from .constants import FALLBACK_NAME
from .interfaces import Transformation

logger = logging.getLogger(__name__)

ConfigLike = Union[HealConfig, Mapping[str, Any], None]

# A quoted key followed by a colon, as in: "name": "Eve", "age": 40
BARE_PAIR_PATTERN = re.compile(r'"\w+":\s*')


class HealState(Enum):
    """States of the repair loop."""

    SCANNING = "scanning"
    DONE = "done"


@dataclass
class HealReport:
    """Outcome of a repair, including which transformation produced validity."""

    text: Any
    original: Any
    state: HealState = HealState.SCANNING
    applied: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)
    resolved_by: Optional[str] = None
    used_fallback: bool = False

    @property
    def valid(self) -> bool:
        """Whether the resulting text is valid JSON."""
        return self.state is HealState.DONE

    @property
    def changed(self) -> bool:
        return self.text != self.original


def _reject_constant(name: str) -> NoReturn:
    raise ValueError(f"{name} is not valid JSON")


def is_valid_json(text: Any) -> bool:
    """Check whether text is a str holding strictly valid JSON."""
    if not isinstance(text, str):
        return False
    try:
        json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        return False
    return True


def _run_step(step: Transformation, text: str, report: HealReport) -> Optional[str]:
    """Run one transformation, returning None when it fails or yields nothing."""
    try:
        result = step.process(text)
    except Exception as exc:  # a failing transformation is skipped, never raised
        logger.debug("Transformation %r raised %s: %s", step.name, type(exc).__name__, exc)
        report.failed.append(step.name)
        return None

    if not isinstance(result, str) or not result:
        logger.debug("Transformation %r returned no text, skipping", step.name)
        report.failed.append(step.name)
        return None
    return result


def aggressive_repair(
    text: Any,
    pipeline: Optional[TransformationPipeline] = None,
    config: ConfigLike = None,
    report: Optional[HealReport] = None,
) -> Any:
    """
    Apply every transformation in order without stopping at valid output.

    The result is then wrapped in braces when it looks like a bare sequence of
    key-value pairs, and given a final bracket balance. Non-str and blank
    input is returned unchanged.

    Args:
        text: Text to repair
        pipeline: Transformations to apply, the default pipeline if None
        config: HealConfig or options mapping
        report: Optional report collecting failed transformation names

    Returns:
        The repaired text, which may still be invalid JSON
    """
    if not isinstance(text, str) or not text.strip():
        return text

    pipeline = pipeline if pipeline is not None else TransformationPipeline.create_default_pipeline()
    config = coerce_config(config)
    report = report if report is not None else HealReport(text=text, original=text)

    result = text
    for step in pipeline:
        if not step.should_apply(config):
            continue
        output = _run_step(step, result, report)
        if output is not None:
            result = output

    result = result.strip()
    if (
        config.wrap_bare_pairs
        and not result.startswith(("{", "["))
        and BARE_PAIR_PATTERN.search(result)
    ):
        result = "{" + result + "}"

    return BracketBalancer().process(result)


def heal_with_report(
    text: Any,
    config: ConfigLike = None,
    pipeline: Optional[TransformationPipeline] = None,
    **options: Any,
) -> HealReport:
    """
    Repair text and describe how the result was obtained.

    Args:
        text: Possibly malformed JSON text
        config: HealConfig or options mapping such as {"aggressive": False}
        pipeline: Transformations to run, the default pipeline if None
        **options: Keyword overrides for config

    Returns:
        HealReport with the repaired (or best-effort) text
    """
    report = HealReport(text=text, original=text)
    if not isinstance(text, str) or not text.strip():
        return report

    if is_valid_json(text):
        report.state = HealState.DONE
        return report

    config = coerce_config(config, **options)
    pipeline = pipeline if pipeline is not None else TransformationPipeline.create_default_pipeline()

    current = text
    steps = iter(pipeline)
    while report.state is HealState.SCANNING:
        step = next(steps, None)
        if step is None:
            break
        if not step.should_apply(config):
            continue
        result = _run_step(step, current, report)
        if result is None:
            continue
        current = result
        report.applied.append(step.name)
        if is_valid_json(current):
            report.state = HealState.DONE
            report.resolved_by = step.name

    if report.state is HealState.SCANNING and config.aggressive:
        fallback = aggressive_repair(text, pipeline, config, report)
        if is_valid_json(fallback):
            current = fallback
            report.state = HealState.DONE
            report.resolved_by = FALLBACK_NAME
            report.used_fallback = True

    report.text = current
    if report.valid:
        logger.debug("Repaired input using %r", report.resolved_by)
    else:
        logger.debug(
            "Could not repair input, returning best effort (brackets: %s)",
            count_brackets(current),
        )
    return report


def heal(
    text: Any,
    config: ConfigLike = None,
    pipeline: Optional[TransformationPipeline] = None,
    **options: Any,
) -> Any:
    """
    Repair malformed JSON text.

    Non-str and blank input is returned unchanged, as is text that is already
    valid JSON. Repairs never raise: when nothing produces valid JSON, the
    best-effort text is returned and callers must validate it themselves.

    Example:
        >>> heal('{name: "Eve", active: True,}')
        '{"name": "Eve", "active": true}'
    """
    return heal_with_report(text, config, pipeline, **options).text


def parse(
    text: Any,
    config: ConfigLike = None,
    pipeline: Optional[TransformationPipeline] = None,
    **options: Any,
) -> Any:
    """Repair text and decode it, returning None when it is still not JSON."""
    healed = heal(text, config, pipeline, **options)
    if not is_valid_json(healed):
        return None
    return json.loads(healed)


class JsonHealer:
    """
    Repair facade owning its own pipeline and configuration.

    Custom transformations registered here never affect other instances or the
    module-level heal() function.
    """

    def __init__(
        self,
        config: ConfigLike = None,
        pipeline: Optional[TransformationPipeline] = None,
    ):
        self.config = coerce_config(config)
        self.pipeline = (
            pipeline.copy()
            if pipeline is not None
            else TransformationPipeline.create_default_pipeline()
        )

    def heal(self, text: Any, **options: Any) -> Any:
        return heal(text, self.config, self.pipeline, **options)

    def heal_with_report(self, text: Any, **options: Any) -> HealReport:
        return heal_with_report(text, self.config, self.pipeline, **options)

    def parse(self, text: Any, **options: Any) -> Any:
        return parse(text, self.config, self.pipeline, **options)

    def register_transformation(
        self,
        name: str,
        func: TransformationLike,
        priority: Optional[int] = None,
    ) -> None:
        """Register a custom transformation; see TransformationPipeline.register."""
        self.pipeline.register(name, func, priority)

    def remove_transformation(self, name: str) -> None:
        self.pipeline.remove(name)

    @property
    def transformation_names(self) -> list[str]:
        return self.pipeline.names
