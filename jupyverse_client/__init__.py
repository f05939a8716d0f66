from ._version import __version__ as __version__
from .client import Client as Client
from .config import DEFAULT_URL as DEFAULT_URL
from .config import TOKEN_ENV_VAR as TOKEN_ENV_VAR
from .config import ClientConfig as ClientConfig
from .contents.models import Content as Content
from .contents.models import CreateContentsBody as CreateContentsBody
from .contents.models import GetContentsParams as GetContentsParams
from .contents.models import PatchContentsBody as PatchContentsBody
from .contents.models import PutContentsBody as PutContentsBody
from .exceptions import ConfigurationError as ConfigurationError
from .exceptions import DecodeError as DecodeError
from .exceptions import JupyverseClientError as JupyverseClientError
from .exceptions import StatusError as StatusError
from .exceptions import TransportError as TransportError
from .kernels.models import CreateKernelBody as CreateKernelBody
from .kernels.models import GetKernelSpecsResponse as GetKernelSpecsResponse
from .kernels.models import Kernel as Kernel
from .kernels.models import KernelSpec as KernelSpec
from .server.models import GetMeResponse as GetMeResponse
from .server.models import GetStatusResponse as GetStatusResponse
from .server.models import GetVersionResponse as GetVersionResponse
from .sessions.models import CreateSessionBody as CreateSessionBody
from .sessions.models import PatchSessionBody as PatchSessionBody
from .sessions.models import Session as Session
from .terminals.models import CreateTerminalBody as CreateTerminalBody
from .terminals.models import Terminal as Terminal
