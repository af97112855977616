"""
命令行界面集成测试

使用click的CliRunner调用命令并检查输出。
"""

import pytest
from click.testing import CliRunner

from card_deck.cli import main


@pytest.fixture
def runner():
    """CLI运行器fixture"""
    return CliRunner()


@pytest.mark.integration
class TestCli:
    """命令行测试"""

    def test_default_output(self, runner):
        """测试默认输出标准52张牌"""
        result = runner.invoke(main, [])
        assert result.exit_code == 0, result.output
        lines = result.output.splitlines()
        assert len(lines) == 52
        assert lines[0] == "Ace of Spades"
        assert lines[13] == "Ace of Diamonds"
        assert lines[-1] == "King of Hearts"

    def test_jokers_and_count(self, runner):
        """测试王牌和只输出牌数"""
        result = runner.invoke(main, ["--jokers", "2", "--decks", "2", "--count"])
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "108"

    def test_jokers_rendered(self, runner):
        """测试王牌显示"""
        result = runner.invoke(main, ["--jokers", "1"])
        assert result.exit_code == 0
        assert result.output.splitlines()[-1] == "Joker"

    def test_remove_rank_and_suit(self, runner):
        """测试移除点数和花色"""
        result = runner.invoke(main, ["--remove-rank", "ace", "--remove-rank", "2",
                                      "--remove-suit", "hearts"])
        assert result.exit_code == 0, result.output
        lines = result.output.splitlines()
        assert len(lines) == 33
        assert lines[0] == "Three of Spades"
        assert not any("Hearts" in line or line.startswith("Ace") for line in lines)

    def test_seeded_shuffle(self, runner):
        """测试相同种子输出相同"""
        first = runner.invoke(main, ["--shuffle", "--seed", "5"])
        second = runner.invoke(main, ["--shuffle", "--seed", "5"])
        assert first.exit_code == second.exit_code == 0
        assert first.output == second.output
        assert len(first.output.splitlines()) == 52
        assert first.output != runner.invoke(main, []).output

    def test_descending_sort(self, runner):
        """测试降序排序"""
        result = runner.invoke(main, ["--sort", "default", "--descending"])
        assert result.exit_code == 0
        assert result.output.splitlines()[0] == "King of Hearts"

    @pytest.mark.parametrize("args", [
        ["--remove-rank", "knight"],
        ["--remove-suit", "stars"],
        ["--remove-suit", "joker"],
        ["--decks", "-1"],
        ["--sort", "color"],
        ["--descending"],
    ])
    def test_invalid_options(self, runner, args):
        """测试无效选项返回用法错误"""
        result = runner.invoke(main, args)
        assert result.exit_code == 2
