from .config import LookupConfig as LookupConfig
from .config import get_config as get_config
from .config import set_config as set_config
from .constant.status import ReasonPhrases as ReasonPhrases
from .constant.status import StatusCodes as StatusCodes
from .errors import HStatusError as HStatusError
from .errors import NotFoundError as NotFoundError
from .policy import Invoke as Invoke
from .policy import MissPolicy as MissPolicy
from .policy import ReturnAbsent as ReturnAbsent
from .policy import Throw as Throw
from .resolver import Resolver as Resolver
from .resolver import code_to_phrase as code_to_phrase
from .resolver import get_status_text as get_status_text
from .resolver import is_phrase as is_phrase
from .resolver import is_status as is_status
from .resolver import phrase_to_code as phrase_to_code

VERSION = "0.1.0"
__version__ = VERSION
