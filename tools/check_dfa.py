#!/usr/bin/env python3

"""
Main entry point: Load a DFA definition and check which words it accepts.
"""
import argparse
import sys
from functools import partial

import better_exchook

import _setup_dfakit_env  # noqa
from dfakit.automaton import DeterministicAutomaton, ERROR_STATE
from dfakit.errors import DefinitionError
from dfakit.source import make_dfa_from_location, read_definition_lines, DEFAULT_TIMEOUT


def _describe(dfa: DeterministicAutomaton):
  print('States:         %s' % ' '.join(dfa.states))
  print('Alphabet:       %s' % ' '.join(dfa.alphabet))
  print('Initial state:  %s' % dfa.initial_state)
  print('Final states:   %s' % ' '.join(dfa.final_states))
  print('Transitions:')
  for state in dfa.states:
    for symbol, target in dfa.state_transition_table.get(state, {}).items():
      print('  %s --%s--> %s' % (state, symbol, target))


def _format_trace(visited) -> str:
  return ' -> '.join('<error>' if state is ERROR_STATE else state for state in visited)


def main():
  """
  Main entry point.
  """
  better_exchook.install()
  parser = argparse.ArgumentParser(description='Check which words a DFA accepts.')
  parser.add_argument('definition', help='Path or http(s) URL of the five-line DFA definition')
  parser.add_argument('words', nargs='*', help='Words to check. Read from stdin (one per line) if none are given.')
  parser.add_argument('--trace', dest='trace', action='store_true', help='Print the visited states for each word.')
  parser.add_argument('--describe', dest='describe', action='store_true', help='Print the parsed definition.')
  parser.add_argument(
    '--timeout', dest='timeout', type=float, default=DEFAULT_TIMEOUT, help='Timeout in seconds for URL fetches.')
  parser.add_argument(
    '--verbose', dest='verbose', action='store_true', help='Print full stacktrace for definition errors.')

  args = parser.parse_args()

  fetch_lines = partial(read_definition_lines, timeout=args.timeout)
  try:
    dfa = make_dfa_from_location(args.definition, fetch_lines=fetch_lines)
  except DefinitionError as de:
    if args.verbose:
      raise de
    else:
      print('Could not load DFA definition from %r\n' % args.definition)
      print(str(de))
      sys.exit(1)
      return

  if args.describe:
    _describe(dfa)

  words = args.words if len(args.words) > 0 else (line.rstrip('\r\n') for line in sys.stdin)
  for word in words:
    verdict = 'accepted' if dfa.accepts(word) else 'rejected'
    if args.trace:
      print('%r: %s  (%s)' % (word, verdict, _format_trace(dfa.trace(word))))
    else:
      print('%r: %s' % (word, verdict))


if __name__ == '__main__':
  main()
