"""Dependencies shared by every command for the duration of the process."""

import logging
from typing import Dict, List, Optional

from .config import Config
from .dirs import Dirs
from .errors import NotebookNotFound
from .notebook import Notebook


logger = logging.getLogger(__name__)


class Container:
    """Holds the configuration and the current notebook, if any."""

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize the container.

        Args:
            config: Global configuration, replaced by the notebook's once bound
        """
        self.global_config = config if config is not None else Config()
        self.config = self.global_config
        self.working_dir = ""
        self._notebook: Optional[Notebook] = None
        self._notebook_error: Optional[NotebookNotFound] = NotebookNotFound("no notebook found")

    def set_current_notebook(self, candidates: List[Dirs]):
        """
        Bind the first candidate that holds a notebook.

        Failing to find one is not an error here: it is reported by
        current_notebook() to the commands which need a notebook.

        Args:
            candidates: Directories to try, in order
        """
        if not candidates:
            raise NotebookNotFound("no candidate paths for the notebook directory")

        self.working_dir = candidates[0].working_dir

        for dirs in candidates:
            try:
                notebook = Notebook.open(dirs.notebook_dir, self.global_config)
            except NotebookNotFound as e:
                logger.debug(f"No notebook for candidate {dirs}: {e}")
                self._notebook_error = e
                continue

            self._notebook = notebook
            self._notebook_error = None
            self.working_dir = dirs.working_dir
            self.config = notebook.config
            logger.info(f"Current notebook: {notebook.path}")
            return

    def current_notebook(self) -> Notebook:
        """
        Return the bound notebook.

        Raises:
            NotebookNotFound: If no candidate held a notebook
        """
        if self._notebook is None:
            raise self._notebook_error
        return self._notebook

    @property
    def has_notebook(self) -> bool:
        return self._notebook is not None

    @property
    def aliases(self) -> Dict[str, str]:
        return self.config.aliases
