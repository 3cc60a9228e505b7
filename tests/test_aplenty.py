import pytest

from advent23.aplenty import (
    Rule,
    Workflow,
    accepted_combinations,
    accepted_rating_sum,
    count_combinations,
    is_accepted,
    main,
    parse_system,
    workflow_dot,
)

EXAMPLE = """px{a<2006:qkq,m>2090:A,rfg}
pv{a>1716:R,A}
lnx{m>1548:A,A}
rfg{s<537:gd,x>2440:R,A}
qs{s>3448:A,lnx}
qkq{x<1416:A,crn}
crn{x>2662:A,R}
in{s<1351:px,qqz}
qqz{s>2770:qs,m<1801:hdj,R}
gd{a>3333:R,R}
hdj{m>838:A,pv}

{x=787,m=2655,a=1222,s=2876}
{x=1679,m=44,a=2067,s=496}
{x=2036,m=264,a=79,s=2244}
{x=2461,m=1339,a=466,s=291}
{x=2127,m=1623,a=2188,s=1013}
"""

PART = {"x": 1, "m": 1, "a": 1, "s": 1}


def _workflows(lines):
    workflows, _ = parse_system(lines + "\n\n{x=1,m=1,a=1,s=1}\n")
    return workflows


def test_parse_system_reads_workflows_and_parts():
    workflows, parts = parse_system(EXAMPLE)
    assert len(workflows) == 11
    assert workflows["px"].rules[0] == Rule("a", "<", 2006, "qkq")
    assert workflows["px"].dest == "rfg"
    assert parts[0] == {"x": 787, "m": 2655, "a": 1222, "s": 2876}
    assert len(parts) == 5


def test_rule_matches_is_strict():
    less = Rule("x", "<", 10, "A")
    assert less.matches({**PART, "x": 9})
    assert not less.matches({**PART, "x": 10})
    greater = Rule("s", ">", 10, "A")
    assert greater.matches({**PART, "s": 11})
    assert not greater.matches({**PART, "s": 10})


def test_workflow_falls_back_to_default():
    workflow = Workflow(rules=(Rule("m", ">", 5, "yes"),), dest="no")
    assert workflow.route({**PART, "m": 6}) == "yes"
    assert workflow.route({**PART, "m": 5}) == "no"


def test_rating_sum_of_example():
    workflows, parts = parse_system(EXAMPLE)
    expected = sum(sum(p.values()) for p in parts if is_accepted(workflows, p))
    assert accepted_rating_sum(EXAMPLE) == expected
    assert accepted_rating_sum(EXAMPLE) == 19114


def test_combinations_of_example():
    assert accepted_combinations(EXAMPLE) == 167409079868000


def test_complementary_rules_partition_the_space():
    everything = count_combinations(_workflows("in{A}"))
    low = count_combinations(_workflows("in{x<2001:A,R}"))
    high = count_combinations(_workflows("in{x<2001:R,A}"))
    assert low + high == everything
    assert low == high
    assert count_combinations(_workflows("in{x<2001:A,A}")) == everything


def test_reject_everything_gives_zero():
    assert count_combinations(_workflows("in{R}")) == 0


def test_empty_range_gives_zero():
    workflows = _workflows("in{A}")
    ranges = {"x": (5, 4), "m": (1, 10), "a": (1, 10), "s": (1, 10)}
    assert count_combinations(workflows, "in", ranges) == 0


def test_accept_counts_range_sizes():
    ranges = {"x": (1, 2), "m": (1, 3), "a": (1, 1), "s": (1, 1)}
    assert count_combinations({}, "A", ranges) == 2 * 3


def test_missing_blank_line_raises():
    with pytest.raises(ValueError):
        parse_system("in{A}\n{x=1,m=1,a=1,s=1}")


def test_bad_category_raises():
    with pytest.raises(ValueError):
        parse_system("in{q<5:A,R}\n\n{x=1,m=1,a=1,s=1}")


def test_bad_relation_raises():
    with pytest.raises(ValueError):
        Rule("x", "=", 5, "A")


def test_unknown_workflow_raises():
    workflows = _workflows("in{x>0:zz,R}")
    with pytest.raises(KeyError):
        is_accepted(workflows, PART)


def test_cycle_raises():
    workflows = _workflows("in{x>0:b,b}\nb{x>0:in,in}")
    with pytest.raises(ValueError):
        is_accepted(workflows, PART)


def test_workflow_dot_contents():
    workflows, _ = parse_system(EXAMPLE)
    dot = workflow_dot(workflows)
    assert dot.startswith("digraph {\n  overlap=false\n")
    assert '  in [style="filled",fillcolor="yellow"]' in dot
    assert '  px [style="filled",fillcolor="white"]' in dot
    assert '  px -> rfg [color="blue"]' in dot
    assert '  px -> qkq [color="magenta"]' in dot
    assert dot.endswith("}\n")


def test_main_prints_combinations(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE, encoding="utf-8")
    main([str(path), "--combinations"])
    out = capsys.readouterr().out
    assert f"#combinations = {accepted_combinations(EXAMPLE)}" in out


def test_main_reports_unreadable_file(tmp_path, capsys):
    missing = tmp_path / "absent.txt"
    main([str(missing)])
    assert f"Cannot read '{missing}'" in capsys.readouterr().out