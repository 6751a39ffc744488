"""Tests for the Matplotlib preview.

The Agg backend is selected so no window is opened, and ``plt.show`` is
replaced to keep the test non-blocking.
"""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
import pytest  # noqa: E402

from pathtracer.core.color import Color  # noqa: E402
from pathtracer.preview.display import show_preview  # noqa: E402
from pathtracer.preview.image import Image  # noqa: E402


@pytest.fixture
def shown(monkeypatch):
    """Capture calls to plt.show."""
    calls = []
    monkeypatch.setattr(plt, "show", lambda block=True: calls.append(block))
    return calls


class TestShowPreview:
    """Tests for show_preview()."""

    def test_returns_figure_with_default_title(self, shown):
        image = Image(6, 4)
        image.fill(Color(0.2, 0.4, 0.6))

        fig = show_preview(image, block=False)
        try:
            ax = fig.axes[0]
            assert ax.get_title() == "Render Preview - 6x4"
            shown_data = np.asarray(ax.images[0].get_array())
            assert shown_data.shape == (4, 6, 3)
            assert shown == [False]
        finally:
            plt.close(fig)

    def test_custom_title(self, shown):
        fig = show_preview(Image(2, 2), title="Cornell box", block=False)
        try:
            assert fig.axes[0].get_title() == "Cornell box"
        finally:
            plt.close(fig)
