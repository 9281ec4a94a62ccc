import pytest

from miniloan.cli import main


class TestCli:
    def test_schedule(self, capsys):
        main(["12000", "--rate", "0", "--years", "1"])
        out = capsys.readouterr().out
        assert "Monthly payment: $1,000.00" in out
        assert out.count("1,000.00") >= 12

    def test_summary(self, capsys):
        main(["10000", "--rate", "6", "--years", "1", "--month", "1"])
        out = capsys.readouterr().out
        assert "Summary as of month 1" in out
        assert "$9,189.34" in out
        assert "$50.00" in out

    def test_frequency_by_stride(self, capsys):
        main(["12000", "--rate", "0", "--years", "1", "--frequency", "6"])
        assert "SemiAnnually payment: $6,000.00" in capsys.readouterr().out

    def test_month_out_of_range(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["10000", "--rate", "6", "--years", "1", "--month", "13"])
        assert exc_info.value.code == 2
        assert "[1, 12]" in capsys.readouterr().err

    @pytest.mark.parametrize(
        "argv",
        [
            ["abc", "--rate", "5", "--years", "1"],
            ["1000", "--rate", "101", "--years", "1"],
            ["1e26", "--rate", "5", "--years", "1"],
            ["NaN", "--rate", "5", "--years", "1"],
            ["1000", "--rate", "5", "--years", "0"],
            ["1000", "--rate", "5", "--years", "1", "--frequency", "Weekly"],
        ],
    )
    def test_bad_arguments(self, argv):
        with pytest.raises(SystemExit):
            main(argv)
