from .config import hosts_file
from .file import *
from .line import *
from .logger import logger
