# src/a11y_auditor/dom/registry.py
import importlib
import pkgutil
import logging
from typing import Dict, Iterable, List, Optional, Union

from .core import Category, RuleDefinition, RuleSpec
from ..exceptions import UnknownRuleError

logger = logging.getLogger(__name__)

RULES_PACKAGE = "a11y_auditor.rules"


class RuleRegistry:
    """
    Central registry for accessibility rules.

    Dynamically discovers RuleDefinition modules from the 'a11y_auditor.rules'
    package and indexes their rules by category (in full-scan order) and by name.
    """

    _by_category: Dict[Category, List[RuleSpec]] = {}
    _by_name: Dict[str, RuleSpec] = {}
    _loaded: bool = False

    @classmethod
    def discover(cls) -> None:
        """
        Scans `a11y_auditor.rules` for modules exposing a `DEFINITION`
        (instance of `RuleDefinition`) and registers every rule it lists.
        A module that fails to import is logged and skipped.
        """
        if cls._loaded:
            return

        try:
            rules_pkg = importlib.import_module(RULES_PACKAGE)

            for _, name, _ in pkgutil.iter_modules(rules_pkg.__path__):
                full_name = f"{RULES_PACKAGE}.{name}"
                try:
                    module = importlib.import_module(full_name)
                    if hasattr(module, "DEFINITION") and isinstance(module.DEFINITION, RuleDefinition):
                        cls._register_definition(module.DEFINITION)
                        logger.debug(f"Rules loaded: {defn_label(module.DEFINITION)}")
                except Exception as e:
                    logger.error(f"Error loading rule module {name}: {e}")

            cls._loaded = True
        except ImportError as e:
            logger.error(f"Could not find rules package: {e}")

    @classmethod
    def _register_definition(cls, defn: RuleDefinition) -> None:
        specs = cls._by_category.setdefault(defn.category, [])
        for spec in defn.rules:
            if spec.name in cls._by_name:
                logger.warning(f"Duplicate rule name '{spec.name}' in {defn.category.value}; keeping the first")
                continue
            specs.append(spec)
            cls._by_name[spec.name] = spec

    @classmethod
    def get_rule(cls, name: str) -> RuleSpec:
        """Retrieves a rule by its snake_case name."""
        cls.discover()
        try:
            return cls._by_name[name]
        except KeyError:
            raise UnknownRuleError(name) from None

    @classmethod
    def has_rule(cls, name: str) -> bool:
        cls.discover()
        return name in cls._by_name

    @classmethod
    def get_rules(cls, category: Union[Category, str]) -> List[RuleSpec]:
        """Returns the rules of one category in full-scan order."""
        cls.discover()
        return list(cls._by_category.get(cls.resolve_category(category), []))

    @classmethod
    def get_all_rules(cls) -> List[RuleSpec]:
        """All rules, category by category, in full-scan order."""
        cls.discover()
        return [spec for category in Category for spec in cls._by_category.get(category, [])]

    @classmethod
    def get_all_rule_names(cls) -> List[str]:
        return [spec.name for spec in cls.get_all_rules()]

    @staticmethod
    def resolve_category(value: Union[Category, str]) -> Category:
        if isinstance(value, Category):
            return value
        try:
            return Category(str(value).strip().lower())
        except ValueError:
            raise UnknownRuleError(str(value)) from None

    @classmethod
    def resolve_categories(cls, values: Optional[Iterable[Union[Category, str]]] = None) -> List[Category]:
        """
        Normalises a category selection. None, an empty selection or 'all'
        selects every category; order always follows the Category enum.
        """
        if values is None or isinstance(values, (str, Category)):
            values = [] if values is None else [values]
        selected = set()
        for value in values:
            if isinstance(value, str) and value.strip().lower() == "all":
                return list(Category)
            selected.add(cls.resolve_category(value))
        if not selected:
            return list(Category)
        return [c for c in Category if c in selected]


def defn_label(defn: RuleDefinition) -> str:
    return f"{defn.category.value} ({len(defn.rules)} rules)"
