from .prompttoolkitdisplay import PromptToolkitDisplay
