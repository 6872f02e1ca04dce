"""Tests for the per-language lint rules."""

import pytest
from lintscope.models import Issue, Severity
from lintscope.rules import get_rule_table, scan


def _scan(text: str, language: str) -> list[Issue]:
  return scan(text, get_rule_table(language))


def _rule_ids(text: str, language: str) -> set[str]:
  return {issue.rule for issue in _scan(text, language)}


def _find(text: str, language: str, rule_id: str) -> Issue:
  return next(issue for issue in _scan(text, language) if issue.rule == rule_id)


class TestJavaScriptRules:
  def test_console_log(self) -> None:
    issue = _find("console.log('x');", "javascript", "no-console")

    assert issue.message == "Found console.log statement; remove it for production"
    assert issue.severity == Severity.WARNING

  def test_debugger(self) -> None:
    assert "no-debugger" in _rule_ids("debugger;", "javascript")

  def test_var(self) -> None:
    issue = _find("var x = 1;", "javascript", "no-var")

    assert (issue.line, issue.column) == (1, 1)
    assert issue.end_column == 6

  def test_loose_equality(self) -> None:
    assert "eqeqeq" in _rule_ids("if (a == b) {}", "javascript")
    assert "eqeqeq" in _rule_ids("if (a != b) {}", "javascript")

  def test_strict_equality_allowed(self) -> None:
    assert "eqeqeq" not in _rule_ids("if (a === b && c !== d) {}", "javascript")

  def test_magic_number(self) -> None:
    issue = _find("return 3600;", "javascript", "no-magic-numbers")

    assert issue.message == "Magic number 3600"

  def test_small_numbers_allowed(self) -> None:
    assert "no-magic-numbers" not in _rule_ids("x = 10;", "javascript")

  def test_eval(self) -> None:
    issue = _find("eval(code);", "javascript", "no-eval")

    assert issue.severity == Severity.ERROR

  def test_alert_and_with(self) -> None:
    ids = _rule_ids("alert('hi');\nwith (obj) { a(); }", "javascript")

    assert {"no-alert", "no-with"} <= ids

  def test_empty_function(self) -> None:
    assert "no-empty-function" in _rule_ids("function noop() {}", "javascript")
    assert "no-empty-function" in _rule_ids("const f = () => {};", "javascript")

  def test_duplicate_branches(self) -> None:
    text = "if (ok) { run(); } else { run(); }"

    assert "no-duplicate-branch" in _rule_ids(text, "javascript")

  def test_distinct_branches(self) -> None:
    text = "if (ok) { run(); } else { stop(); }"

    assert "no-duplicate-branch" not in _rule_ids(text, "javascript")

  def test_arrow_body(self) -> None:
    text = "const f = (x) => { return x * 2; };"

    assert "arrow-body-style" in _rule_ids(text, "javascript")

  def test_extra_semicolon(self) -> None:
    assert "no-extra-semi" in _rule_ids("let a = 1;;", "javascript")

  def test_double_quotes(self) -> None:
    assert "quotes" in _rule_ids('const s = "hello";', "javascript")
    assert "quotes" not in _rule_ids("const s = 'hello';", "javascript")


class TestTypeScriptRules:
  def test_inherits_javascript_rules(self) -> None:
    assert "no-var" in _rule_ids("var x = 1;", "typescript")

  def test_explicit_any(self) -> None:
    assert "no-explicit-any" in _rule_ids("let x: any = 1;", "typescript")

  def test_non_null_assertion(self) -> None:
    assert "no-non-null-assertion" in _rule_ids("user!.name", "typescript")

  def test_ts_ignore(self) -> None:
    assert "no-ts-ignore" in _rule_ids("// @ts-ignore\nfoo();", "typescript")

  def test_as_any(self) -> None:
    assert "no-as-any" in _rule_ids("const y = x as any;", "typescript")


class TestPythonRules:
  def test_bare_except(self, python_snippet: str) -> None:
    issue = _find(python_snippet, "python", "bare-except")

    assert issue.severity == Severity.WARNING
    assert (issue.line, issue.column) == (4, 5)

  def test_typed_except_allowed(self) -> None:
    text = "try:\n    run()\nexcept ValueError:\n    raise\n"

    assert "bare-except" not in _rule_ids(text, "python")

  def test_none_comparisons(self) -> None:
    assert "use-is-none" in _rule_ids("if x == None:\n    y()\n", "python")
    assert "use-is-not-none" in _rule_ids("if x != None:\n    y()\n", "python")

  def test_boolean_comparison(self) -> None:
    issue = _find("if flag == True:\n    go()\n", "python", "simplify-boolean")

    assert issue.message == "Unnecessary comparison to a boolean: == True"

  def test_eval_and_exec(self) -> None:
    ids = _rule_ids("eval(src)\nexec(src)\n", "python")

    assert {"no-eval", "no-exec"} <= ids

  def test_print(self) -> None:
    assert "no-print" in _rule_ids("print('hi')", "python")

  def test_line_length(self) -> None:
    assert "line-too-long" in _rule_ids("x" * 80, "python")
    assert "line-too-long" not in _rule_ids("x" * 79, "python")

  def test_wildcard_import(self) -> None:
    assert "no-wildcard-import" in _rule_ids("from os import *", "python")

  def test_mutable_default(self) -> None:
    text = "def f(items=[]):\n    return items\n"

    assert "mutable-default-argument" in _rule_ids(text, "python")

  def test_missing_self(self) -> None:
    text = "class A:\n    def run():\n        return 1\n"

    assert "missing-self" in _rule_ids(text, "python")

  def test_todo(self) -> None:
    issue = _find("# todo: fix this", "python", "no-todo")

    assert issue.message == "Found TODO comment"

  def test_pass_and_empty_block(self) -> None:
    ids = _rule_ids("if ready:\n    pass\n", "python")

    assert {"no-pass", "empty-block"} <= ids

  def test_hardcoded_secret(self) -> None:
    issue = _find('password = "hunter2"', "python", "hardcoded-secret")

    assert issue.severity == Severity.ERROR

  def test_mixed_indentation_on_one_line(self) -> None:
    issue = _find("def f():\n \tx = 1\n", "python", "mixed-indentation")

    assert (issue.line, issue.column) == (2, 1)
    assert issue.severity == Severity.ERROR

  def test_inconsistent_indentation_across_lines(self) -> None:
    text = "if a:\n    x = 1\nif b:\n\ty = 2\n"

    issues = _scan(text, "python")
    ids = {issue.rule for issue in issues}

    assert "inconsistent-indentation" in ids
    assert "mixed-indentation" not in ids

  def test_consistent_indentation(self) -> None:
    text = "if a:\n    x = 1\nif b:\n    y = 2\n"

    assert "inconsistent-indentation" not in _rule_ids(text, "python")

  def test_clean_code(self) -> None:
    assert _scan("def add(a, b):\n    return a + b\n", "python") == []


class TestJavaRules:
  def test_sysout(self) -> None:
    issue = _find('System.out.println("hi");', "java", "no-sysout")

    assert issue.message == "Found System.out.println statement"

  def test_print_stack_trace(self) -> None:
    assert "no-printstacktrace" in _rule_ids("e.printStackTrace();", "java")

  def test_empty_catch(self) -> None:
    text = "try { run(); } catch (IOException e) {}"

    issue = _find(text, "java", "no-empty-catch")

    assert issue.severity == Severity.ERROR

  def test_generic_exception(self) -> None:
    text = "try { run(); } catch (Exception e) { log(e); }"

    assert "catch-generic-exception" in _rule_ids(text, "java")

  def test_string_comparison(self) -> None:
    text = 'String role = input == "admin" ? "a" : "b";'

    assert "string-comparison" in _rule_ids(text, "java")

  def test_wrappers(self) -> None:
    issue = _find("Integer n = new Integer(5);", "java", "avoid-new-wrapper")

    assert issue.message == "Wrapper created with new Integer()"
    assert "avoid-new-string" in _rule_ids('String s = new String("x");', "java")

  def test_missing_override(self) -> None:
    text = "public class A {\n  public boolean equals(Object o) {\n    return true;\n  }\n}\n"

    issue = _find(text, "java", "missing-override")

    assert issue.message == "equals() may be missing @Override"
    assert (issue.line, issue.column) == (2, 3)

  def test_override_with_trailing_whitespace(self) -> None:
    text = "class A {\n  @Override  \n  public boolean equals(Object o) {\n    return true;\n  }\n}\n"

    assert "missing-override" not in _rule_ids(text, "java")

  def test_override_on_same_line(self) -> None:
    text = "class A {\n  @Override public String toString() { return \"\"; }\n}\n"

    assert "missing-override" not in _rule_ids(text, "java")

  def test_override_present(self) -> None:
    text = (
      "public class A {\n"
      "  @Override\n"
      "  public boolean equals(Object o) {\n"
      "    return true;\n"
      "  }\n"
      "}\n"
    )

    assert "missing-override" not in _rule_ids(text, "java")

  def test_public_field(self) -> None:
    assert "no-public-field" in _rule_ids("public int count;", "java")
    assert "no-public-field" not in _rule_ids("public class Foo {}", "java")

  def test_too_many_parameters(self) -> None:
    text = "void f(int a, int b, int c, int d, int e, int g) {}"

    assert "too-many-parameters" in _rule_ids(text, "java")

  def test_hardcoded_secret(self) -> None:
    assert "hardcoded-secret" in _rule_ids('String password = "secret123";', "java")

  def test_todo(self) -> None:
    issue = _find("// FIXME: later", "java", "no-todo")

    assert issue.message == "Found FIXME comment"


class TestGoRules:
  def test_panic(self, go_snippet: str) -> None:
    issue = _find(go_snippet, "go", "no-panic")

    assert issue.severity == Severity.WARNING
    assert issue.line == 10

  def test_fmt_print(self) -> None:
    issue = _find('fmt.Println("x")', "go", "no-fmt-print")

    assert issue.message == "Found fmt.Println call"

  def test_empty_error_handling(self) -> None:
    issue = _find("if err != nil {}", "go", "no-empty-error-handling")

    assert issue.severity == Severity.ERROR

  @pytest.mark.parametrize("text", [
    "v, _ := parse(s)",
    "v, _ := strconv.Atoi(s)",
  ])
  def test_ignored_error(self, text: str) -> None:
    assert "no-ignored-error" in _rule_ids(text, "go")

  def test_prefer_literal(self) -> None:
    assert "prefer-literal" in _rule_ids("p := new(Config)", "go")

  def test_empty_struct(self) -> None:
    assert "empty-struct" in _rule_ids("type Empty struct{}", "go")

  def test_init_function(self) -> None:
    assert "init-function" in _rule_ids("func init() {\n}\n", "go")

  def test_uninitialized_map(self) -> None:
    assert "uninitialized-map" in _rule_ids("var cache map[string]int\n", "go")

  def test_initialized_map(self) -> None:
    text = "var cache map[string]int = make(map[string]int)\n"

    assert "uninitialized-map" not in _rule_ids(text, "go")

  def test_hardcoded_token(self) -> None:
    assert "hardcoded-secret" in _rule_ids('token := "abc123"', "go")

  def test_line_length(self) -> None:
    assert "line-too-long" in _rule_ids("x" * 120, "go")
    assert "line-too-long" not in _rule_ids("x" * 119, "go")

  def test_exported_function_message(self) -> None:
    issue = _find("func Serve() {}\n", "go", "exported-function-comment")

    assert issue.message == "Exported function Serve may be missing a doc comment"
