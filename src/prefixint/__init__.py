from .encoder import encode, encoded_length
from .length_class import MAX_VALUE, MAX_LENGTH, length_class, length_class_by_scan
from .sink import write, SequenceWriter, IncompleteWriteError
from .settings import Settings, configure_logging_from_settings
