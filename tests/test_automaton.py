import _setup_test_env  # noqa
import sys
import unittest
import better_exchook
import pytest

from dfakit.automaton import DeterministicAutomaton, ERROR_STATE
from dfakit.parser import make_dfa


def _make_toggle_dfa(final_line='B'):
  return make_dfa(['A B', '0 1', 'A', final_line, 'A B B A'])


def test_DeterministicAutomaton_accepts_toggle():
  dfa = _make_toggle_dfa()
  assert dfa.accepts('1')
  assert not dfa.accepts('')
  assert not dfa.accepts('11')
  assert dfa.accepts('10')
  assert dfa.accepts('0001000')
  assert not dfa.accepts('101')  # A -1-> B -0-> B -1-> A
  assert dfa.accepts('111')


def test_DeterministicAutomaton_empty_word_initial_final():
  dfa = _make_toggle_dfa('A')
  assert dfa.accepts('')
  assert dfa.accepts('11')
  assert not dfa.accepts('1')


def test_DeterministicAutomaton_no_final_states():
  dfa = _make_toggle_dfa('')
  for word in ['', '0', '1', '10', '0110', '2', 'x']:
    assert not dfa.accepts(word)


def test_DeterministicAutomaton_duplicate_final_states():
  dfa = _make_toggle_dfa('B B')
  assert dfa.final_states == ('B', 'B')
  assert dfa.accepts('1')
  assert not dfa.accepts('11')


def test_DeterministicAutomaton_unknown_symbol_rejects():
  dfa = _make_toggle_dfa('A B')
  assert dfa.accepts('0')
  assert not dfa.accepts('2')
  assert not dfa.accepts('01a')
  assert not dfa.accepts('1 ')
  assert dfa.get_next_state('A', '2') is ERROR_STATE
  assert dfa.get_next_state(ERROR_STATE, '0') is ERROR_STATE


def test_DeterministicAutomaton_state_without_transitions():
  dfa = DeterministicAutomaton(
    states=['A', 'B'], alphabet=['0'], initial_state='A', final_states=['A', 'B'],
    state_transition_table={'A': {'0': 'B'}})
  assert dfa.accepts('')
  assert dfa.accepts('0')
  assert not dfa.accepts('00')
  assert dfa.trace('000') == ['A', 'B', ERROR_STATE]


def test_DeterministicAutomaton_empty_alphabet():
  dfa = make_dfa(['A', '', 'A', 'A', ''])
  assert dfa.accepts('')
  assert not dfa.accepts('0')


def test_DeterministicAutomaton_trace():
  dfa = _make_toggle_dfa()
  assert dfa.trace('') == ['A']
  assert dfa.trace('101') == ['A', 'B', 'B', 'A']
  assert dfa.trace('1x1') == ['A', 'B', ERROR_STATE]


def test_DeterministicAutomaton_is_final():
  dfa = _make_toggle_dfa()
  assert dfa.is_final('B')
  assert not dfa.is_final('A')
  assert not dfa.is_final(ERROR_STATE)


def test_DeterministicAutomaton_immutable():
  dfa = _make_toggle_dfa()
  assert isinstance(dfa.states, tuple)
  assert isinstance(dfa.alphabet, tuple)
  assert isinstance(dfa.final_states, tuple)
  with pytest.raises(TypeError):
    dfa.state_transition_table['A'] = {}
  with pytest.raises(TypeError):
    dfa.state_transition_table['A']['0'] = 'B'
  with pytest.raises(AttributeError):
    dfa.initial_state = 'B'
  assert dfa.accepts('1')


def test_DeterministicAutomaton_copies_input_table():
  table = {'A': {'0': 'A'}}
  dfa = DeterministicAutomaton(
    states=['A'], alphabet=['0'], initial_state='A', final_states=['A'], state_transition_table=table)
  table['A']['0'] = 'B'
  del table['A']
  assert dfa.state_transition_table == {'A': {'0': 'A'}}
  assert dfa.accepts('000')


def test_DeterministicAutomaton_to_dict_and_eq():
  dfa = _make_toggle_dfa()
  assert dfa.to_dict() == {
    'states': ['A', 'B'], 'alphabet': ['0', '1'], 'initial_state': 'A', 'final_states': ['B'],
    'state_transition_table': {'A': {'0': 'A', '1': 'B'}, 'B': {'0': 'B', '1': 'A'}}}
  assert dfa == _make_toggle_dfa()
  assert hash(dfa) == hash(_make_toggle_dfa())
  assert dfa != _make_toggle_dfa('A')
  assert dfa != 'not a dfa'


if __name__ == "__main__":
  try:
    better_exchook.install()
    if len(sys.argv) <= 1:
      for k, v in sorted(globals().items()):
        if k.startswith("test_"):
          print("-" * 40)
          print("Executing: %s" % k)
          try:
            v()
          except unittest.SkipTest as exc:
            print("SkipTest:", exc)
          print("-" * 40)
      print("Finished all tests.")
    else:
      assert len(sys.argv) >= 2
      for arg in sys.argv[1:]:
        print("Executing: %s" % arg)
        if arg in globals():
          globals()[arg]()  # assume function and execute
        else:
          eval(arg)  # assume Python code and execute
  finally:
    pass
