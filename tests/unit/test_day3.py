import day3

EXAMPLE = "xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))"


def test_example_input_data():
    assert day3.calculate(EXAMPLE) == (161, 1)


def test_only_wellformed_instructions_match():
    record = day3.parse(EXAMPLE)
    assert record.multipliers == [(2, 4), (5, 5), (11, 8), (8, 5)]


def test_no_mul_means_no_pairs():
    assert day3.parse("hello, world (1,2) mu l(3,4)").multipliers == []
    assert day3.parse("").multipliers == []


def test_truncated_candidates_do_not_fail():
    for text in ["m", "mul(", "mul(12", "mul(12,", "mul(12,3", "mmul(1,2"]:
        record = day3.parse(text)
        assert record.multipliers == []


def test_failed_candidate_rescans_inside_itself():
    # "mul(mul(3,4)" fails at the first "mul(" then matches the second
    assert day3.parse("mul(mul(3,4)").multipliers == [(3, 4)]


def test_matched_span_is_not_rescanned():
    assert day3.parse("mul(1,2)mul(3,4))").multipliers == [(1, 2), (3, 4)]


def test_whitespace_inside_is_rejected():
    assert day3.parse("mul( 1,2) mul(1, 2)").multipliers == []
