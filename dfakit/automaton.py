from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

"""
General placeholder for all unproductive (error) states.
"""
ERROR_STATE = None


class DeterministicAutomaton:
  """
  A validated DFA. Immutable once constructed.

  States are single alphabetic characters, symbols single digit characters.
  The transition table maps state -> (symbol -> state). A state without an entry, or a symbol without an entry
  below a state, has no transition defined and leads to `ERROR_STATE`.
  """

  def __init__(self, states: Iterable[str], alphabet: Iterable[str], initial_state: str,
               final_states: Iterable[str], state_transition_table: Mapping[str, Mapping[str, str]]):
    self._states: Tuple[str, ...] = tuple(states)
    self._alphabet: Tuple[str, ...] = tuple(alphabet)
    self._initial_state = initial_state
    self._final_states: Tuple[str, ...] = tuple(final_states)
    self._final_state_set = frozenset(self._final_states)
    self._state_transition_table: Mapping[str, Mapping[str, str]] = MappingProxyType({
      state: MappingProxyType(dict(transitions)) for state, transitions in state_transition_table.items()})
    assert self._initial_state in self._states
    assert self._final_state_set <= set(self._states)

  @property
  def states(self) -> Tuple[str, ...]:
    """
    All states, in order of first occurrence in the definition.
    """
    return self._states

  @property
  def alphabet(self) -> Tuple[str, ...]:
    return self._alphabet

  @property
  def initial_state(self) -> str:
    return self._initial_state

  @property
  def final_states(self) -> Tuple[str, ...]:
    """
    Accepting states as given in the definition, possibly with duplicates.
    """
    return self._final_states

  @property
  def state_transition_table(self) -> Mapping[str, Mapping[str, str]]:
    """
    Read-only view state -> (symbol -> state).
    """
    return self._state_transition_table

  def get_next_state(self, state: Optional[str], char: str) -> Optional[str]:
    """
    :returns: next state or `ERROR_STATE` if no transition is defined
    """
    if state is ERROR_STATE:
      return ERROR_STATE
    return self._state_transition_table.get(state, {}).get(char, ERROR_STATE)

  def is_final(self, state: Optional[str]) -> bool:
    return state is not ERROR_STATE and state in self._final_state_set

  def accepts(self, word: str) -> bool:
    state = self._initial_state
    for char in word:
      state = self.get_next_state(state, char)
      if state is ERROR_STATE:
        return False
    return self.is_final(state)

  def trace(self, word: str) -> List[Optional[str]]:
    """
    :returns: all visited states, starting with the initial state.
      Ends with `ERROR_STATE` if a char has no transition, remaining chars are not consumed then.
    """
    state = self._initial_state
    visited = [state]
    for char in word:
      state = self.get_next_state(state, char)
      visited.append(state)
      if state is ERROR_STATE:
        break
    return visited

  def to_dict(self) -> Dict[str, object]:
    return {
      'states': list(self._states),
      'alphabet': list(self._alphabet),
      'initial_state': self._initial_state,
      'final_states': list(self._final_states),
      'state_transition_table': {
        state: dict(transitions) for state, transitions in self._state_transition_table.items()}}

  def __eq__(self, other):
    if not isinstance(other, DeterministicAutomaton):
      return NotImplemented
    return self.to_dict() == other.to_dict()

  def __hash__(self):
    return hash((self._states, self._alphabet, self._initial_state, self._final_states))

  def __repr__(self):
    return 'DeterministicAutomaton(states=%r, alphabet=%r, initial_state=%r, final_states=%r)' % (
      self._states, self._alphabet, self._initial_state, self._final_states)
