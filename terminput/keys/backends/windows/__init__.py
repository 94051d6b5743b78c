from .windowskeyreader import WindowsKeyReader
