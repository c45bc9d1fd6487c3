import pytest

from grammar import (Grammar, DRAW, NOOP, turn_left, turn_right,
                     MissingDrawingRuleError, expand, expand_generations,
                     iter_generations, reachable_symbols,
                     check_drawing_rules)


KOCH = Grammar(
    start='A',
    rules={'A': 'A+A--A+A'},
    drawing_rules={'A': DRAW, '+': turn_left(60), '-': turn_right(60)},
)

ALGAE = Grammar(start='A', rules={'A': 'AB', 'B': 'A'}, drawing_rules={})


class TestExpand:
    def test_single_pass(self):
        assert expand(ALGAE, 'A') == 'AB'
        assert expand(ALGAE, 'AB') == 'ABA'

    def test_no_fixed_point_iteration(self):
        # the successor of A contains B, which must not be rewritten again
        assert expand(ALGAE, 'A') == 'AB'

    def test_symbols_without_rule_are_copied(self):
        assert expand(KOCH, '+-[]X') == '+-[]X'

    def test_order_preserved(self):
        assert expand(KOCH, '-A+') == '-A+A--A+A+'

    def test_empty_input(self):
        assert expand(KOCH, '') == ''


class TestGenerations:
    def test_algae(self):
        assert expand_generations(ALGAE, 0) == 'A'
        assert expand_generations(ALGAE, 1) == 'AB'
        assert expand_generations(ALGAE, 2) == 'ABA'
        assert expand_generations(ALGAE, 3) == 'ABAAB'

    def test_koch_lengths(self):
        gen1 = expand_generations(KOCH, 1)
        assert gen1 == 'A+A--A+A'
        assert len(gen1) == 8

        # four A's become 8 symbols each, the four turns are copied
        gen2 = expand_generations(KOCH, 2)
        assert len(gen2) == 4 * 8 + 4
        assert gen2.count('A') == 16

    def test_deterministic(self):
        assert expand_generations(KOCH, 4) == expand_generations(KOCH, 4)

    def test_zero_generations_returns_start(self):
        assert expand_generations(KOCH, 0) == 'A'

    def test_negative_count(self):
        with pytest.raises(ValueError):
            expand_generations(KOCH, -1)

    def test_iter_generations_matches_expand_generations(self):
        strings = list(iter_generations(ALGAE, 4))
        assert len(strings) == 5
        for i, s in enumerate(strings):
            assert s == expand_generations(ALGAE, i)


class TestDrawingRuleCoverage:
    def test_reachable_symbols(self):
        grammar = Grammar(start='X', rules={'X': 'F[+X]', 'F': 'FF'},
                          drawing_rules={})
        assert reachable_symbols(grammar, 0) == {'X'}
        assert reachable_symbols(grammar, 1) == {'X', 'F', '[', '+', ']'}

    def test_reachable_only_up_to_generation(self):
        grammar = Grammar(start='A', rules={'A': 'B', 'B': 'C'},
                          drawing_rules={})
        assert reachable_symbols(grammar, 1) == {'A', 'B'}
        assert reachable_symbols(grammar, 5) == {'A', 'B', 'C'}

    def test_complete_rules_pass(self):
        check_drawing_rules(KOCH, 6)

    def test_missing_rule(self):
        grammar = Grammar(start='FX', rules={'X': 'X+YF'},
                          drawing_rules={'F': DRAW, 'X': NOOP, '+': NOOP})
        check_drawing_rules(grammar, 0)
        with pytest.raises(MissingDrawingRuleError) as excinfo:
            check_drawing_rules(grammar, 1)
        assert excinfo.value.symbol == 'Y'
