from .streamkeyreader import StreamKeyReader
