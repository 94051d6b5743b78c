from .plaindisplay import PlainDisplay
