from typing import Optional, Sequence, Dict, Tuple

EXPECTED_NUM_LINES = 5


def get_context_lines(lines: Sequence[str], line_num: int, num_before_context_lines=1,
                      num_after_context_lines=1) -> Dict[int, str]:
  """
  :param lines: all definition lines
  :param line_num: line to show context for, starting counting at 1
  :return: dict line number -> line, both starting counting at 1
  """
  assert 1 <= line_num <= len(lines)
  return {
    context_line_num + 1: lines[context_line_num]
    for context_line_num in range(
      max(0, line_num - 1 - num_before_context_lines), min(len(lines), line_num + num_after_context_lines))}


def make_error_message(lines: Optional[Sequence[str]], line_num: Optional[int], error_name: str, message: str,
                       col: Optional[int] = None, width: int = 1) -> str:
  """
  :param col: column of the offending token, starting counting at 1. If `None`, the whole line is marked.
  :param width: number of marked characters
  """
  if lines is None or line_num is None or not 1 <= line_num <= len(lines):
    return '%s\n\n%s' % (error_name, message)
  line_num_pad_size = 3
  context_lines = get_context_lines(lines, line_num, num_before_context_lines=2, num_after_context_lines=2)
  if col is None:
    col, width = 1, len(lines[line_num - 1])
  return '%s on line %s:%s\n\n' % (error_name, line_num, col) + '\n'.join([
    ('%0' + str(line_num_pad_size) + 'i: %s%s') % (
      context_line_num, context_line,
      ('\n' + (' ' * (col - 1 + line_num_pad_size + 2)) + '^' * max(1, width))
      if context_line_num == line_num else '')
    for context_line_num, context_line in context_lines.items()]
  ) + '\n\n' + message


def _rebuild_definition_error(error_class, state):
  error = error_class.__new__(error_class)
  error.args = (state['message'],)
  error.__dict__.update(state)
  return error


class DefinitionError(Exception):
  """
  A DFA definition that violates one of the structural rules of a DFA.
  """

  error_name = 'Invalid DFA definition'

  def __init__(self, message: str):
    super(DefinitionError, self).__init__(message)
    self.message = message
    self.lines: Optional[Tuple[str, ...]] = None
    self.line_num: Optional[int] = None
    self.col: Optional[int] = None
    self.width = 1

  def locate(self, lines: Sequence[str], line_num: int, col: Optional[int] = None, width: int = 1):
    """
    Attaches the definition source to this error, so that `str(self)` points at the offending token.

    :param line_num: starting counting at 1
    :param col: starting counting at 1
    :rtype: DefinitionError
    """
    self.lines = tuple(lines)
    self.line_num = line_num
    self.col = col
    self.width = width
    return self

  def __reduce__(self):
    # subclass constructors take the offending values, not the message
    return _rebuild_definition_error, (self.__class__, dict(self.__dict__))

  def __str__(self):
    return make_error_message(
      self.lines, self.line_num, error_name=self.error_name, message=self.message, col=self.col, width=self.width)


class MalformedLineCountError(DefinitionError):
  error_name = 'Malformed definition'

  def __init__(self, num_lines: int):
    super().__init__(
      'Expected %i lines containing dfa definition; found %i' % (EXPECTED_NUM_LINES, num_lines))
    self.expected_num_lines = EXPECTED_NUM_LINES
    self.num_lines = num_lines


class MalformedStateTokenError(DefinitionError):
  error_name = 'Malformed state'

  def __init__(self, token: str):
    super().__init__('Expected single alpha characters separated by whitespace; found %r' % token)
    self.token = token


class EmptyStateSetError(DefinitionError):
  error_name = 'Empty state set'

  def __init__(self):
    super().__init__('Expected a DFA to contain at least one state; found 0')


class MalformedSymbolTokenError(DefinitionError):
  error_name = 'Malformed symbol'

  def __init__(self, token: str):
    super().__init__('Expected single digit characters separated by whitespace; found %r' % token)
    self.token = token


class AlphabetTooLargeError(DefinitionError):
  error_name = 'Alphabet too large'

  def __init__(self, num_states: int, num_symbols: int):
    super().__init__(
      'Expected a DFA alphabet to be less than or equal to the number of states; '
      'found %i states and %i alphabet characters' % (num_states, num_symbols))
    self.num_states = num_states
    self.num_symbols = num_symbols


class InvalidInitialStateError(DefinitionError):
  error_name = 'Invalid initial state'

  def __init__(self, states: Sequence[str], token: str):
    super().__init__('Expected initial state to be one of the allowed states %s; found %r' % (list(states), token))
    self.states = tuple(states)
    self.token = token


class InvalidAcceptingStateError(DefinitionError):
  error_name = 'Invalid accepting state'

  def __init__(self, states: Sequence[str], token: str):
    super().__init__('Expected accepting state to be one of the allowed states %s; found %r' % (list(states), token))
    self.states = tuple(states)
    self.token = token


class WrongTransitionCountError(DefinitionError):
  error_name = 'Wrong transition count'

  def __init__(self, expected: int, actual: int):
    super().__init__('Expected %i items in the transition table; found %i' % (expected, actual))
    self.expected = expected
    self.actual = actual


class InvalidTransitionTargetError(DefinitionError):
  error_name = 'Invalid transition target'

  def __init__(self, states: Sequence[str], state: str, symbol: str, target: str):
    super().__init__(
      'Expected transition target of (%r, %r) to be one of the allowed states %s; found %r' % (
        state, symbol, list(states), target))
    self.states = tuple(states)
    self.state = state
    self.symbol = symbol
    self.target = target
