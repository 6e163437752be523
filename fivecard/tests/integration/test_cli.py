"""
CLI集成测试.

使用click的CliRunner调用compare和deal命令.
"""

import pytest
from click.testing import CliRunner

from fivecard.cli.main import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.mark.integration
class TestCompareCommand:
    """compare命令测试."""

    def test_compare_straight_vs_full_house(self, runner):
        """测试顺子对葫芦，葫芦获胜."""
        result = runner.invoke(cli, ["compare", "AH KD QS JC 10H", "KH KD KS 10C 10H"])

        assert result.exit_code == 0, result.output
        assert "Hand evaluation: Straight (Ace high)" in result.output
        assert "Hand evaluation: Full House (King over Ten)" in result.output
        assert "Card: Rank Ace, Suit Hearts" in result.output
        assert result.output.strip().endswith("Player 2 wins")

    def test_compare_first_wins(self, runner):
        result = runner.invoke(cli, ["compare", "KH KD KS 10C 10H", "QH QD QS AC AH"])
        assert result.exit_code == 0, result.output
        assert result.output.strip().endswith("Player 1 wins")

    def test_compare_tie(self, runner):
        result = runner.invoke(cli, ["compare", "9H 9D 5S 4C 2H", "9S 9C 5H 4D 2C"])
        assert result.exit_code == 0, result.output
        assert result.output.strip().endswith("Tie")

    def test_compare_invalid_card(self, runner):
        """测试无法解析的牌返回参数错误."""
        result = runner.invoke(cli, ["compare", "AH KD QS JC 1H", "KH KD KS 10C 10H"])
        assert result.exit_code == 2
        assert "HAND1" in result.output

    def test_compare_wrong_size(self, runner):
        result = runner.invoke(cli, ["compare", "KH KD KS 10C 10H", "AH KD"])
        assert result.exit_code == 2
        assert "HAND2" in result.output


@pytest.mark.integration
class TestDealCommand:
    """deal命令测试."""

    def test_deal_seeded_is_reproducible(self, runner):
        """测试相同种子输出相同."""
        first = runner.invoke(cli, ["deal", "--seed", "42"])
        second = runner.invoke(cli, ["deal", "--seed", "42"])

        assert first.exit_code == 0, first.output
        assert first.output == second.output
        assert "Player 1:" in first.output
        assert "Player 2:" in first.output

    def test_deal_players(self, runner):
        result = runner.invoke(cli, ["deal", "--seed", "1", "--players", "10"])
        assert result.exit_code == 0, result.output
        assert "Player 10:" in result.output
        assert "wins with" in result.output or "Tie between" in result.output

    def test_deal_too_many_players(self, runner):
        """测试超过10人时参数校验失败."""
        result = runner.invoke(cli, ["deal", "--players", "11"])
        assert result.exit_code == 2

    def test_log_level_option(self, runner):
        result = runner.invoke(cli, ["--log-level", "debug", "deal", "--seed", "3"])
        assert result.exit_code == 0, result.output
