"""Shared test fixtures."""

import pytest

from romhan.composer import Composer, CompositionHost, PreviewDisplay


class RecordingHost(CompositionHost):
    """Records composition calls and tracks the text a document would hold."""

    def __init__(self):
        self.calls = []
        self.pending = None
        self.committed = ""

    def begin(self):
        self.calls.append(("begin",))
        self.pending = ""

    def update(self, text):
        self.calls.append(("update", text))
        self.pending = text

    def commit(self):
        self.calls.append(("commit",))
        self.committed += self.pending or ""
        self.pending = None

    def cancel(self):
        self.calls.append(("cancel",))
        self.pending = None

    def names(self):
        return [call[0] for call in self.calls]


class RecordingPreview(PreviewDisplay):
    def __init__(self):
        self.shown = []
        self.visible = False

    def show(self, composed, raw, anchor):
        self.shown.append((composed, raw, anchor))
        self.visible = True

    def hide(self):
        self.visible = False


class FailingHost(CompositionHost):
    def begin(self):
        raise RuntimeError("begin rejected")

    def update(self, text):
        raise RuntimeError("update rejected")

    def commit(self):
        raise RuntimeError("commit rejected")

    def cancel(self):
        raise RuntimeError("cancel rejected")


@pytest.fixture
def host():
    return RecordingHost()


@pytest.fixture
def preview():
    return RecordingPreview()


@pytest.fixture
def composer(host, preview):
    return Composer(host, preview)
