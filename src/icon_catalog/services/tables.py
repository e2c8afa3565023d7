"""Loading rule and synonym tables from YAML files.

The built-in tables live in code (DEFAULT_RULES, DEFAULT_SYNONYMS). Projects
with their own icon sets can extend them through YAML files instead of
editing the engine. Loaded tables are immutable, like the defaults.
"""

import logging
from pathlib import Path
from types import MappingProxyType

import yaml
from pydantic import ValidationError

from icon_catalog.categorization.rules import DEFAULT_RULES, Rule, RuleTable
from icon_catalog.core.exceptions import RuleTableError, SynonymTableError
from icon_catalog.schemas.tables import RuleTableFile, SynonymTableFile
from icon_catalog.tagging.synonyms import DEFAULT_SYNONYMS, SynonymTable

logger = logging.getLogger(__name__)


def _read_yaml(path: Path) -> object:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def load_rule_table(path: str | Path) -> tuple[Rule, ...]:
    """Load an ordered rule table from YAML.

    Raises:
        RuleTableError: If the file cannot be read, is not YAML, or fails validation
    """
    path = Path(path)
    try:
        data = _read_yaml(path)
        parsed = RuleTableFile.model_validate(data)
    except FileNotFoundError:
        raise RuleTableError(details={"path": str(path), "reason": "file not found"})
    except UnicodeDecodeError as e:
        raise RuleTableError(details={"path": str(path), "reason": f"not UTF-8 text: {e}"})
    except OSError as e:
        raise RuleTableError(details={"path": str(path), "reason": f"cannot read file: {e.strerror or e}"})
    except yaml.YAMLError as e:
        raise RuleTableError(details={"path": str(path), "reason": f"invalid YAML: {e}"})
    except ValidationError as e:
        raise RuleTableError(details={"path": str(path), "reason": str(e)})

    rules = tuple(Rule(entry.category, tuple(entry.keywords)) for entry in parsed.rules)
    logger.info(f"Loaded {len(rules)} category rules from {path}")
    return rules


def load_synonym_table(path: str | Path) -> SynonymTable:
    """Load a synonym table from YAML.

    Raises:
        SynonymTableError: If the file cannot be read, is not YAML, or fails validation
    """
    path = Path(path)
    try:
        data = _read_yaml(path)
        parsed = SynonymTableFile.model_validate(data)
    except FileNotFoundError:
        raise SynonymTableError(details={"path": str(path), "reason": "file not found"})
    except UnicodeDecodeError as e:
        raise SynonymTableError(details={"path": str(path), "reason": f"not UTF-8 text: {e}"})
    except OSError as e:
        raise SynonymTableError(details={"path": str(path), "reason": f"cannot read file: {e.strerror or e}"})
    except yaml.YAMLError as e:
        raise SynonymTableError(details={"path": str(path), "reason": f"invalid YAML: {e}"})
    except ValidationError as e:
        raise SynonymTableError(details={"path": str(path), "reason": str(e)})

    table = MappingProxyType({trigger: tuple(tags) for trigger, tags in parsed.synonyms.items()})
    logger.info(f"Loaded {len(table)} synonym triggers from {path}")
    return table


def resolve_tables(
    rules_file: str | Path | None = None,
    synonyms_file: str | Path | None = None,
) -> tuple[RuleTable, SynonymTable]:
    """Return the configured tables, falling back to the built-in defaults."""
    rules = load_rule_table(rules_file) if rules_file else DEFAULT_RULES
    synonyms = load_synonym_table(synonyms_file) if synonyms_file else DEFAULT_SYNONYMS
    return rules, synonyms
