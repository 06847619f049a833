"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
LogicBoxes SDK, a product of Garudex Labs

Validation gate for criteria and form records.

Rules are declared per field as comma-separated tags (``"required,len=2"``).
Rule functions live in a ``RuleRegistry``; the process-wide
``default_registry`` is built once at import time and frozen. Custom rules
are added by deriving a new registry, never by mutating the default one::

    registry = default_registry.with_rules(even=lambda value, _: len(value) % 2 == 0)
    validator = Validator(registry)
    validator.validate(record)

Validation stops at the first violation, in descriptor order.
"""

from __future__ import annotations

import re
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from logicboxes.codec.fields import FieldDescriptor, describe, is_zero
from logicboxes.exceptions import ValidationError, ValidationRuleError
from logicboxes.logging_config import get_logger, log_validation_failure

logger = get_logger(__name__)

RuleFunc = Callable[[Any, Optional[str]], bool]

SKIP = "-"
OMIT_EMPTY = "omitempty"
REQUIRED = "required"

PASSWORD_MIN_LENGTH = 9
PASSWORD_MAX_LENGTH = 16

RGX_NUMBER = re.compile(r"[0-9]+")

# Non-ASCII letter ranges accepted in email addresses
_UCS = "".join(chr(lo) + "-" + chr(hi) for lo, hi in ((0xA0, 0xD7FF), (0xF900, 0xFDCF), (0xFDF0, 0xFFEF)))
_ATOM = r"[A-Za-z0-9!#$%&'*+/=?^_`{|}~" + _UCS + r"-]+"
_LABEL_EDGE = r"[A-Za-z0-9" + _UCS + r"]"
_LABEL_BODY = r"[A-Za-z0-9" + _UCS + r".~-]*"
_TLD_EDGE = r"[A-Za-z" + _UCS + r"]"
RGX_EMAIL = re.compile(
    _ATOM + r"(?:\." + _ATOM + r")*"
    + r"@"
    + r"(?:" + _LABEL_EDGE + r"(?:" + _LABEL_BODY + _LABEL_EDGE + r")?\.)+"
    + _TLD_EDGE + r"(?:" + _LABEL_BODY + _TLD_EDGE + r")?\.?"
)
RGX_LOWER = re.compile(r"[a-z]")
RGX_UPPER = re.compile(r"[A-Z]")
RGX_SYMBOL = re.compile(r"[~*!@$#%_+.?:,{}]")

ISO3166_ALPHA2 = frozenset("""
AD AE AF AG AI AL AM AO AQ AR AS AT AU AW AX AZ BA BB BD BE BF BG BH BI BJ BL
BM BN BO BQ BR BS BT BV BW BY BZ CA CC CD CF CG CH CI CK CL CM CN CO CR CU CV
CW CX CY CZ DE DJ DK DM DO DZ EC EE EG EH ER ES ET FI FJ FK FM FO FR GA GB GD
GE GF GG GH GI GL GM GN GP GQ GR GS GT GU GW GY HK HM HN HR HT HU ID IE IL IM
IN IO IQ IR IS IT JE JM JO JP KE KG KH KI KM KN KP KR KW KY KZ LA LB LC LI LK
LR LS LT LU LV LY MA MC MD ME MF MG MH MK ML MM MN MO MP MQ MR MS MT MU MV MW
MX MY MZ NA NC NE NF NG NI NL NO NP NR NU NZ OM PA PE PF PG PH PK PL PM PN PR
PS PT PW PY QA RE RO RS RU RW SA SB SC SD SE SG SH SI SJ SK SL SM SN SO SR SS
ST SV SX SY SZ TC TD TF TG TH TJ TK TL TM TN TO TR TT TV TW TZ UA UG UM US UY
UZ VA VC VE VG VI VN VU WF WS YE YT ZA ZM ZW
""".split())


def match_password(password: str, with_length_range: bool = False) -> bool:
    """
    Check the reseller password composition rule.

    A password needs at least one lowercase letter, one uppercase letter and
    one symbol from ``~*!@$#%_+.?:,{}``. With ``with_length_range`` it must
    also be 9 to 16 characters long.
    """
    if with_length_range and not (PASSWORD_MIN_LENGTH <= len(password) <= PASSWORD_MAX_LENGTH):
        return False
    return bool(
        RGX_LOWER.search(password)
        and RGX_UPPER.search(password)
        and RGX_SYMBOL.search(password)
    )


def _text(value: Any) -> str:
    if isinstance(value, Enum):
        value = value.value
    return value if isinstance(value, str) else str(value)


def _int_param(rule: str, param: Optional[str]) -> int:
    if param is None:
        raise ValidationRuleError(f"rule '{rule}' requires a parameter")
    try:
        return int(param)
    except ValueError:
        raise ValidationRuleError(f"rule '{rule}' expects an integer parameter, got '{param}'") from None


def _size(value: Any) -> float:
    """Length for strings and sequences, magnitude for numbers."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value
    return len(_text(value)) if isinstance(value, (str, Enum)) else len(value)


def _rule_required(value: Any, param: Optional[str]) -> bool:
    if value is None:
        return False
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, (bool, int, float)):
        return bool(value)
    return len(value) > 0 if hasattr(value, "__len__") else True


def _rule_min(value: Any, param: Optional[str]) -> bool:
    return _size(value) >= _int_param("min", param)


def _rule_max(value: Any, param: Optional[str]) -> bool:
    return _size(value) <= _int_param("max", param)


def _rule_len(value: Any, param: Optional[str]) -> bool:
    return _size(value) == _int_param("len", param)


def _rule_number(value: Any, param: Optional[str]) -> bool:
    return bool(RGX_NUMBER.fullmatch(_text(value)))


def _rule_email(value: Any, param: Optional[str]) -> bool:
    return bool(RGX_EMAIL.fullmatch(_text(value)))


def _rule_iso3166_1_alpha2(value: Any, param: Optional[str]) -> bool:
    return _text(value) in ISO3166_ALPHA2


def _rule_rcpassword(value: Any, param: Optional[str]) -> bool:
    return match_password(_text(value), with_length_range=False)


class RuleRegistry:
    """
    Named validation rules.

    A registry is open for ``register()`` until ``freeze()`` is called.
    ``with_rules()`` derives a new, frozen registry that extends this one.
    """

    def __init__(self, rules: Optional[Mapping[str, RuleFunc]] = None) -> None:
        self._rules: Dict[str, RuleFunc] = dict(rules or {})
        self._frozen = False

    def register(self, name: str, func: RuleFunc) -> None:
        """
        Register a rule under ``name``.

        Raises:
            ValidationRuleError: If the registry is frozen, the name is
                reserved or already taken, or ``func`` is not callable
        """
        if self._frozen:
            raise ValidationRuleError(f"cannot register '{name}': rule registry is frozen")
        if not name or name in (SKIP, OMIT_EMPTY) or "," in name or "=" in name:
            raise ValidationRuleError(f"invalid rule name '{name}'")
        if name in self._rules:
            raise ValidationRuleError(f"rule '{name}' is already registered")
        if not callable(func):
            raise ValidationRuleError(f"rule '{name}' is not callable")
        self._rules[name] = func
        logger.debug("registered_validation_rule", rule=name)

    def freeze(self) -> "RuleRegistry":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def with_rules(self, **rules: RuleFunc) -> "RuleRegistry":
        """Return a new frozen registry holding these rules plus ``rules``."""
        derived = RuleRegistry(self._rules)
        for name, func in rules.items():
            derived.register(name, func)
        return derived.freeze()

    def get(self, name: str) -> RuleFunc:
        try:
            return self._rules[name]
        except KeyError:
            raise ValidationRuleError(f"undefined validation rule '{name}'") from None

    def __contains__(self, name: object) -> bool:
        return name in self._rules

    def names(self) -> List[str]:
        return sorted(self._rules)


def build_default_registry() -> RuleRegistry:
    """Create the builtin rule set plus the reseller password rule."""
    registry = RuleRegistry()
    registry.register(REQUIRED, _rule_required)
    registry.register("min", _rule_min)
    registry.register("max", _rule_max)
    registry.register("len", _rule_len)
    registry.register("number", _rule_number)
    registry.register("email", _rule_email)
    registry.register("iso3166_1_alpha2", _rule_iso3166_1_alpha2)
    registry.register("rcpassword", _rule_rcpassword)
    return registry.freeze()


default_registry = build_default_registry()


@dataclass(frozen=True)
class FieldRules:
    """Compiled rules for one field."""

    descriptor: FieldDescriptor
    skip: bool
    optional: bool
    rules: Tuple[Tuple[str, Optional[str], RuleFunc], ...]


def parse_tag(tag: str) -> List[Tuple[str, Optional[str]]]:
    """Split ``"required,min=9"`` into ``[("required", None), ("min", "9")]``."""
    parsed = []
    for part in tag.split(","):
        part = part.strip()
        if not part:
            continue
        name, sep, param = part.partition("=")
        parsed.append((name.strip(), param.strip() if sep else None))
    return parsed


class Validator:
    """
    Applies field rules to records.

    Rule sets are compiled once per record type and cached; compiled rule
    sets are immutable and safe to share between threads.
    """

    def __init__(self, registry: Optional[RuleRegistry] = None) -> None:
        self._registry = registry if registry is not None else default_registry
        self._compiled: Dict[type, Tuple[FieldRules, ...]] = {}
        self._lock = threading.Lock()

    @property
    def registry(self) -> RuleRegistry:
        return self._registry

    def compile(self, record_type: type) -> Tuple[FieldRules, ...]:
        """
        Compile (or fetch the cached) rule set of a record type.

        Raises:
            ValidationRuleError: If a tag names an unknown rule
        """
        cached = self._compiled.get(record_type)
        if cached is not None:
            return cached

        compiled = []
        for descriptor in describe(record_type):
            skip = False
            optional = False
            rules = []
            for name, param in parse_tag(descriptor.validate):
                if name == SKIP:
                    skip = True
                elif name == OMIT_EMPTY:
                    optional = True
                else:
                    rules.append((name, param, self._registry.get(name)))
            compiled.append(FieldRules(descriptor, skip, optional, tuple(rules)))

        result = tuple(compiled)
        with self._lock:
            self._compiled[record_type] = result
        return result

    def validate(self, record: Any) -> None:
        """
        Validate ``record``; return silently when it is valid.

        Raises:
            ValidationError: On the first violated rule
        """
        record_name = type(record).__name__
        for field_rules in self.compile(type(record)):
            if field_rules.skip:
                continue

            descriptor = field_rules.descriptor
            value = getattr(record, descriptor.name)

            if field_rules.optional and is_zero(descriptor.kind, value):
                continue

            for name, param, func in field_rules.rules:
                if name != REQUIRED and value is None:
                    ok = False
                else:
                    ok = func(value, param)
                if not ok:
                    log_validation_failure(logger, record_name, descriptor.name, name)
                    raise ValidationError(descriptor.name, name, param, record=record_name)


default_validator = Validator()


def validate(record: Any) -> None:
    """Validate ``record`` against the default rule registry."""
    default_validator.validate(record)
