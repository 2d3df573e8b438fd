"""
Parses and validates the textual DFA definition:

  <state> <state> ...
  <symbol> <symbol> ...
  <initial-state>
  <accepting-state> <accepting-state> ...
  <transition> <transition> ...

Transitions are flattened row-major over the states and column-major over the symbols as listed on line 2:
Entry `i * len(symbols) + j` is the target of `(states[i], symbols[j])`.
States are ordered by their first occurrence, duplicates are dropped.
Repeated symbols still count for the size checks and get their own column, the last column wins.
"""
import re
from typing import Dict, List, Sequence, Tuple

from dfakit.automaton import DeterministicAutomaton
from dfakit.errors import EXPECTED_NUM_LINES, MalformedLineCountError, MalformedStateTokenError, \
  EmptyStateSetError, MalformedSymbolTokenError, AlphabetTooLargeError, InvalidInitialStateError, \
  InvalidAcceptingStateError, WrongTransitionCountError, InvalidTransitionTargetError

STATES_LINE, ALPHABET_LINE, INITIAL_STATE_LINE, FINAL_STATES_LINE, TRANSITIONS_LINE = range(EXPECTED_NUM_LINES)

_TOKEN_REGEX = re.compile(r'\S+')


def tokenize_line(line: str) -> Tuple[Tuple[str, ...], Tuple[int, ...]]:
  """
  :returns: whitespace separated tokens with their start positions
  """
  matches = list(_TOKEN_REGEX.finditer(line))
  return tuple(match.group() for match in matches), tuple(match.start() for match in matches)


def split_definition_text(text: str) -> List[str]:
  """
  Splits on newline characters only. Strips carriage returns at line ends and drops trailing empty lines.
  """
  lines = [line[:-1] if line.endswith('\r') else line for line in text.split('\n')]
  while len(lines) > 0 and lines[-1] == '':
    lines.pop()
  return lines


def is_state_token(token: str) -> bool:
  return len(token) == 1 and token.isalpha()


def is_symbol_token(token: str) -> bool:
  return len(token) == 1 and token.isdecimal() and not token.isalpha()


def _unique(tokens: Sequence[str]) -> Tuple[str, ...]:
  return tuple(dict.fromkeys(tokens))


def make_dfa(lines: Sequence[str]) -> DeterministicAutomaton:
  """
  Validates the definition and builds the automaton.
  Fails on the first violated rule, in the order the rules are checked below.

  :param lines: exactly five definition lines, without line endings
  :raises: DefinitionError
  """
  lines = list(lines)
  if len(lines) != EXPECTED_NUM_LINES:
    raise MalformedLineCountError(len(lines))

  def error_at(error, line_idx, pos=None, token=''):
    if pos is None:
      return error.locate(lines, line_idx + 1)
    return error.locate(lines, line_idx + 1, col=pos + 1, width=len(token))

  state_tokens, state_tokens_pos = tokenize_line(lines[STATES_LINE])
  for token, pos in zip(state_tokens, state_tokens_pos):
    if not is_state_token(token):
      raise error_at(MalformedStateTokenError(token), STATES_LINE, pos, token)
  states = _unique(state_tokens)
  if len(states) == 0:
    raise error_at(EmptyStateSetError(), STATES_LINE)
  state_set = frozenset(states)

  symbol_tokens, symbol_tokens_pos = tokenize_line(lines[ALPHABET_LINE])
  for token, pos in zip(symbol_tokens, symbol_tokens_pos):
    if not is_symbol_token(token):
      raise error_at(MalformedSymbolTokenError(token), ALPHABET_LINE, pos, token)
  alphabet = _unique(symbol_tokens)
  if len(symbol_tokens) > len(states):
    raise error_at(AlphabetTooLargeError(num_states=len(states), num_symbols=len(symbol_tokens)), ALPHABET_LINE)

  initial_line = lines[INITIAL_STATE_LINE]
  initial_state = initial_line.strip()
  if len(initial_state) != 1 or initial_state not in state_set:
    pos = len(initial_line) - len(initial_line.lstrip())
    raise error_at(
      InvalidInitialStateError(states, initial_state), INITIAL_STATE_LINE, pos, initial_state or ' ')

  final_tokens, final_tokens_pos = tokenize_line(lines[FINAL_STATES_LINE])
  for token, pos in zip(final_tokens, final_tokens_pos):
    if token not in state_set:
      raise error_at(InvalidAcceptingStateError(states, token), FINAL_STATES_LINE, pos, token)

  transition_tokens, transition_tokens_pos = tokenize_line(lines[TRANSITIONS_LINE])
  num_transitions = len(states) * len(symbol_tokens)
  if len(transition_tokens) != num_transitions:
    raise error_at(
      WrongTransitionCountError(expected=num_transitions, actual=len(transition_tokens)), TRANSITIONS_LINE)

  state_transition_table: Dict[str, Dict[str, str]] = {}
  for state_idx, state in enumerate(states):
    for symbol_idx, symbol in enumerate(symbol_tokens):
      token_idx = state_idx * len(symbol_tokens) + symbol_idx
      target = transition_tokens[token_idx]
      if target not in state_set:
        raise error_at(
          InvalidTransitionTargetError(states, state=state, symbol=symbol, target=target), TRANSITIONS_LINE,
          transition_tokens_pos[token_idx], target)
      state_transition_table.setdefault(state, {})[symbol] = target

  return DeterministicAutomaton(
    states=states, alphabet=alphabet, initial_state=initial_state, final_states=final_tokens,
    state_transition_table=state_transition_table)


def make_dfa_from_text(text: str) -> DeterministicAutomaton:
  """
  :raises: DefinitionError
  """
  return make_dfa(split_definition_text(text))
