"""Pattern rule tables and the lint scanner."""

from lintscope.rules.base import ImportBlock, Predicate, Rule, RuleTable, rule
from lintscope.rules.matching import Match, find_all, position
from lintscope.rules.registry import get_rule_table, list_rules
from lintscope.rules.scanner import scan

__all__ = [
  "ImportBlock",
  "Match",
  "Predicate",
  "Rule",
  "RuleTable",
  "find_all",
  "get_rule_table",
  "list_rules",
  "position",
  "rule",
  "scan",
]
