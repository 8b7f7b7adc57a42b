from .sensitivity import Sensitivity, Provenance, Language  # noqa: F401
from .list_type import ListType  # noqa: F401
from .artefact import Artefact  # noqa: F401
from .artefact_search import ArtefactSearch  # noqa: F401
