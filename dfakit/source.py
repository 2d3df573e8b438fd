from pathlib import Path
from typing import Callable, List, Optional

import requests

from dfakit.automaton import DeterministicAutomaton
from dfakit.parser import make_dfa, split_definition_text

URL_SCHEMES = ('http://', 'https://')
DEFAULT_TIMEOUT = 10.0


def is_url(location: str) -> bool:
  return location.lower().startswith(URL_SCHEMES)


def read_definition_lines(location: str, timeout: float = DEFAULT_TIMEOUT) -> Optional[List[str]]:
  """
  Resolves `location` (an http(s) URL or a local path) to the definition lines.

  :returns: the lines, or `None` if nothing could be found at `location`
  """
  if is_url(location):
    try:
      response = requests.get(location, timeout=timeout)
    except requests.RequestException:
      return None
    if not response.ok:
      return None
    return split_definition_text(response.text)
  path = Path(location)
  if not path.is_file():
    return None
  return split_definition_text(path.read_text())


def make_dfa_from_location(location: str,
                           fetch_lines: Callable[[str], Optional[List[str]]] = read_definition_lines
                           ) -> DeterministicAutomaton:
  """
  :param fetch_lines: resolves a location to the definition lines, `None` if not found
  :raises: DefinitionError. A location that could not be fetched is reported as `MalformedLineCountError` with 0 lines.
  """
  lines = fetch_lines(location)
  return make_dfa([] if lines is None else lines)
