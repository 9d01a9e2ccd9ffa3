# ABOUTME: Rendering boundary between the browser core and a presentation layer.
# ABOUTME: Exports the RenderingSink protocol and the view records it receives.

from bookbrowse.render.sink import RenderingSink
from bookbrowse.render.views import RGB, BookDetail, BookPreview, DialogKind, OptionKind

__all__ = [
    "RGB",
    "BookDetail",
    "BookPreview",
    "DialogKind",
    "OptionKind",
    "RenderingSink",
]
