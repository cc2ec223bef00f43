"""
Integration test for the full SavAlloc workflow.

Runs several sessions against the same goal file to check that goals,
allocation and progress hold together across restarts.
"""

from decimal import Decimal

import pytest
from click.testing import CliRunner

from savalloc.allocator import SavingsAllocator
from savalloc.cli import main
from savalloc.serialization import load_goals


@pytest.mark.integration
class TestFullWorkflow:
    """Integration tests across allocator, persistence and CLI."""

    def test_reference_scenario(self, data_file, capsys):
        """
        Income 200 with goals (G1, 100, 50%) and (G2, 100, 50%).

        G1 moves 100 of 200, G2 moves 50 of the remaining 100.
        """
        allocator = SavingsAllocator(Decimal("200"), data_file=data_file)
        allocator.add_goal("G1", Decimal("100"), Decimal("50"))
        allocator.add_goal("G2", Decimal("100"), Decimal("50"))

        allocator.allocate()
        capsys.readouterr()
        allocator.display_progress()

        assert allocator.savings.balance == Decimal("150")
        assert allocator.income.balance == Decimal("50")
        assert capsys.readouterr().out.splitlines() == [
            "Progress towards 'G1' savings goal: 150.00%",
            "Progress towards 'G2' savings goal: 150.00%",
        ]

    def test_goals_accumulate_across_runs(self, data_file):
        """Test each run keeps earlier goals and appends new ones."""
        runner = CliRunner()
        env = {"SAVALLOC_DATA_FILE": str(data_file)}

        first = runner.invoke(main, [], input="100\nHouse\n1000\n10\ndone\n", env=env)
        second = runner.invoke(main, [], input="300\nCar\n600\n50\ndone\n", env=env)

        assert first.exit_code == 0, first.output
        assert second.exit_code == 0, second.output

        goals = load_goals(data_file)
        assert [g.as_tuple() for g in goals] == [
            ("House", Decimal("1000"), Decimal("10")),
            ("Car", Decimal("600"), Decimal("50")),
        ]

        # Second run: House takes 30 of 300, Car takes 135 of 270
        assert "Savings Account Balance: $165.00" in second.output
        assert "Income Account Balance: $135.00" in second.output
        assert "Progress towards 'Car' savings goal: 27.50%" in second.output

    def test_malformed_lines_survive_until_next_save(self, write_data_file, data_file):
        """Test skipped lines are dropped when the list is rewritten."""
        write_data_file("A,100,10\nX,1\nB,200,20\n")

        allocator = SavingsAllocator(Decimal("50"), data_file=data_file)
        assert [g.name for g in allocator.goals] == ["A", "B"]
        assert "X,1" in data_file.read_text(encoding="utf-8")

        allocator.allocate()

        assert data_file.read_text(encoding="utf-8") == "A,100,10\nB,200,20\n"
