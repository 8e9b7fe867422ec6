import matplotlib.pyplot as plt
import pytest

from scinotation import EngineeringFormatter

class TestEngineeringFormatter:
    def test_latex(self):
        fmt = EngineeringFormatter()
        assert fmt(1500) == "$1.50 \\times 10^{3}$"
        assert fmt(12) == "$12.0$"
        assert fmt(0) == "0"

    def test_plain(self):
        fmt = EngineeringFormatter(notation="plain", precision=2)
        assert fmt(1500) == "1.5e3"

    def test_rejects_markup_notations(self):
        with pytest.raises(ValueError):
            EngineeringFormatter(notation="html")

    def test_rejects_bad_precision(self):
        with pytest.raises(ValueError):
            EngineeringFormatter(precision=0)

    def test_axis(self):
        fig, ax = plt.subplots()
        ax.plot([0, 2e-3], [0, 5e4])
        ax.xaxis.set_major_formatter(EngineeringFormatter())
        ax.yaxis.set_major_formatter(EngineeringFormatter(notation="plain"))
        fig.canvas.draw()
        labels = [t.get_text() for t in ax.get_xticklabels()]
        assert labels
        assert all(l == "0" or l.startswith("$") for l in labels)
        assert any("e3" in t.get_text() for t in ax.get_yticklabels())
        plt.close(fig)
