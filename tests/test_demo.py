import pandas as pd
import pytest

from polynomial_regression.demo import format_vector, main


class TestFormatVector:
    def test_general_format(self):
        assert format_vector([0.0, 1.0, 1.8, -1.07]) == "[0, 1, 1.8, -1.07]"

    def test_single_value(self):
        assert format_vector([2.5]) == "[2.5]"

    def test_empty(self):
        assert format_vector([]) == "[]"

    def test_six_significant_digits(self):
        assert format_vector([1.0 / 3.0]) == "[0.333333]"


class TestMain:
    def test_default_samples(self, capsys):
        assert main([]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "x     : [0, 1, 2, 3, 4]"
        assert lines[1] == "y     : [1, 1.8, 1.3, 2.5, 6.3]"
        assert lines[2] == "x2    : [0, 1, 2, 3, 4]"
        assert lines[3] == "order : 2"
        assert lines[4] == "*" * 60
        assert "coeffs = fit(x, y, order) : [1.42, -1.07, 0.55]" in lines
        assert "eval(coeffs, x2)          : [1.42, 0.9, 1.48, 3.16, 5.94]" in lines
        assert "polyFit(x, y, x2, order) : [1.42, 0.9, 1.48, 3.16, 5.94]" in lines
        assert "polyFit(x, y, 5, order)  : 9.82" in lines
        assert any(line.startswith("rmse  : 0.56") for line in lines)

    def test_options(self, capsys):
        assert main(["--order", "1", "--x2", "0", "10", "--at", "2"]) == 0
        out = capsys.readouterr().out
        assert "order : 1" in out
        assert "x2    : [0, 10]" in out
        assert "polyFit(x, y, 2, order)" in out

    def test_signed_pivoting(self, capsys):
        assert main(["--pivoting", "signed"]) == 0
        assert "coeffs = fit(x, y, order) : [1.42, -1.07, 0.55]" in capsys.readouterr().out

    def test_data_file(self, tmp_path, capsys):
        file_path = tmp_path / "line.csv"
        pd.DataFrame({"t": [0.0, 1.0, 2.0, 3.0], "v": [1.0, 3.0, 5.0, 7.0]}).to_csv(
            file_path, index=False
        )
        code = main([
            "--data", str(file_path), "--x-column", "t", "--y-column", "v",
            "--order", "1", "--verbose",
        ])
        assert code == 0
        out = capsys.readouterr().out
        assert "Loading samples from" in out
        assert "coeffs = fit(x, y, order) : [1, 2]" in out
        assert "polyFit(x, y, 5, order)  : 11" in out

    def test_singular_data(self, tmp_path, capsys):
        file_path = tmp_path / "flat.csv"
        pd.DataFrame({"x": [1.0, 1.0, 1.0], "y": [1.0, 2.0, 3.0]}).to_csv(file_path, index=False)
        assert main(["--data", str(file_path)]) == 1
        assert "Singular system" in capsys.readouterr().err

    def test_negative_order(self, capsys):
        assert main(["--order", "-1"]) == 1
        assert "non-negative" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys):
        assert main(["--data", str(tmp_path / "missing.csv")]) == 1
        assert capsys.readouterr().err.startswith("Error:")

    def test_unknown_pivoting_rejected(self):
        with pytest.raises(SystemExit):
            main(["--pivoting", "complete"])
