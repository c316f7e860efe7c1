#!/usr/bin/env python3
"""
lexical_sort.py

Sorts a set of words by a user-defined lexicographic ordering. The ordering
(e.g. "abcdefghijklmnopqrstuvwxyz", or any reshuffle of it) comes first in the
input, followed by the words to sort, all separated by whitespace. Words are
inserted into a LexicalTrie built with that ordering and printed back one per
line in sorted order.

Extra words can be pulled from wordfreq's frequency lists or from WordNet
lemmas; those are filtered down to words spelled with the alphabet.

Usage:
    python lexical_sort.py [--input words.txt] [--alphabet ALPHABET | --unordered] \
                           [--wordfreq LANG [--limit N]] \
                           [--wordnet] [--output sorted.txt] [--verbose]

Options:
  -h, --help            Show this help message and exit
  --input INPUT, -i     File to read the alphabet and words from. Defaults to stdin.
  --alphabet ALPHABET, -a
                        Ordering to sort by. When given, every input token is a word.
  --unordered, -u       Keep words in first-insertion order instead of an alphabet.
  --wordfreq LANG, -f   Also sort the words of wordfreq's list for LANG.
  --limit LIMIT, -l     Take at most LIMIT words from wordfreq (most frequent first).
  --wordnet, -w         Also sort every WordNet lemma name.
  --output OUTPUT, -o   Write the sorted words here instead of stdout.
  --verbose, -v         Print debug information to stderr.
"""

import argparse
import itertools
import os
import sys

from trie import LexicalTrie, CharacterNotInAlphabetError

# Third‐party imports (ensure you ran: pip install nltk wordfreq)
try:
    import nltk
    from nltk.corpus import wordnet as wn
except ImportError:
    print("ERROR: nltk not installed. Run `pip install nltk` first.", file=sys.stderr)
    sys.exit(1)

try:
    from wordfreq import iter_wordlist
except ImportError:
    print("ERROR: wordfreq not installed. Run `pip install wordfreq` first.", file=sys.stderr)
    sys.exit(1)


VERBOSE = False


class DuplicateAlphabetCharacterError(ValueError):
    """Raised when a letter appears more than once in the alphabet."""


################################################################################
# UTILITY FUNCTIONS
################################################################################

def debug(msg):
    """Print debug message to stderr with a DEBUG prefix, if --verbose is on."""
    if VERBOSE:
        print(f"DEBUG: {msg}", file=sys.stderr)

def has_duplicates(alphabet):
    """Return True if any character appears more than once in `alphabet`."""
    return len(set(alphabet)) != len(alphabet)

def spelled_with(word, alphabet):
    """Return True if every character of `word` is in `alphabet` (or there is no alphabet)."""
    return alphabet is None or all(ch in alphabet for ch in word)


################################################################################
# 1. Input (alphabet + words)
################################################################################

def read_tokens(input_path=None):
    """
    Return the whitespace-separated tokens of `input_path`, or of stdin when
    no path is given.
    """
    if input_path is None:
        debug("read_tokens: Reading from stdin")
        return sys.stdin.read().split()

    debug(f"read_tokens: Reading from '{input_path}'")
    if not os.path.isfile(input_path):
        raise RuntimeError(f"could not open input file at '{input_path}'")
    with open(input_path, "r", encoding="utf-8") as f:
        return f.read().split()

def split_alphabet(tokens, alphabet=None, unordered=False):
    """
    Work out the ordering and the words to sort from the input tokens.

    Unless the alphabet is given explicitly (or the sort is unordered), the
    first token is the alphabet and the rest are words. Returns a tuple
    (alphabet_or_None, words). Raises ValueError on empty input and
    DuplicateAlphabetCharacterError on a repeated alphabet letter.
    """
    if unordered:
        return None, list(tokens)

    if alphabet is None:
        if not tokens:
            raise ValueError("No words or alphabet in input.")
        alphabet, tokens = tokens[0], tokens[1:]

    if has_duplicates(alphabet):
        raise DuplicateAlphabetCharacterError("A letter appears multiple times in the alphabet.")
    debug(f"split_alphabet: Alphabet is '{alphabet}', {len(tokens)} words follow")
    return alphabet, list(tokens)


################################################################################
# 2. wordfreq loader (raises on failure)
################################################################################

def load_wordfreq_words(lang, alphabet=None, limit=None):
    """
    Use wordfreq.iter_wordlist(lang) to retrieve words in descending frequency
    order, keep those spelled with `alphabet`, and return them as a list
    (at most `limit` words are read). Raises RuntimeError on failure.
    """
    print(f"\n→ Loading wordfreq’s '{lang}' list…", file=sys.stderr)
    words = []
    try:
        for w in itertools.islice(iter_wordlist(lang), limit):
            if spelled_with(w, alphabet):
                words.append(w)
            else:
                debug(f"load_wordfreq_words: '{w}' is not spelled with the alphabet; skipping")
    except Exception as e:
        raise RuntimeError(f"wordfreq loader error: {e}")

    if not words:
        raise RuntimeError(f"wordfreq loader error: no words retrieved for '{lang}'")
    print(f"  → {len(words)} entries loaded from wordfreq.", file=sys.stderr)
    return words


################################################################################
# 3. WordNet (NLTK) loader (raises on failure)
################################################################################

def load_wordnet_words(alphabet=None):
    """
    Ensure WordNet is downloaded, then collect all lemma names spelled with
    `alphabet`. Return as a set. Raises RuntimeError on failure.
    """
    print("\n→ Loading WordNet lemmas (via NLTK)…", file=sys.stderr)
    try:
        wn.ensure_loaded()
    except LookupError:
        print("  • WordNet not found locally. Downloading via nltk.download('wordnet') …", file=sys.stderr)
        try:
            nltk.download('wordnet', quiet=True)
            wn.ensure_loaded()
        except Exception as e:
            raise RuntimeError(f"WordNet download error: {e}")

    lemmas = set()
    try:
        for synset in wn.all_synsets():
            for lemma in synset.lemma_names():
                if spelled_with(lemma, alphabet):
                    lemmas.add(lemma)
    except Exception as e:
        raise RuntimeError(f"WordNet iteration error: {e}")

    if not lemmas:
        raise RuntimeError("WordNet loader error: no lemmas spelled with the alphabet")
    print(f"  → {len(lemmas)} unique WordNet lemmas.", file=sys.stderr)
    return lemmas


################################################################################
# 4. Sorting
################################################################################

def build_trie(alphabet, words):
    """Insert every word into a new LexicalTrie ordered by `alphabet`."""
    trie = LexicalTrie(alphabet)
    for w in words:
        trie.insert(w)
    debug(f"build_trie: {trie.num_words} inserts")
    return trie

def lexical_sort(words, alphabet=None):
    """Return the distinct `words` sorted by `alphabet` (insertion order if None)."""
    return build_trie(alphabet, words).get_strings()


################################################################################
# MAIN
################################################################################

def main(argv=None):
    global VERBOSE

    parser = argparse.ArgumentParser(
        description="Sort words by a user-defined lexicographic ordering."
    )
    parser.add_argument(
        "--input", "-i", default=None,
        help="File to read the alphabet and words from (whitespace separated). Defaults to stdin."
    )
    ordering = parser.add_mutually_exclusive_group()
    ordering.add_argument(
        "--alphabet", "-a", default=None,
        help="Ordering to sort by. When given, every input token is treated as a word."
    )
    ordering.add_argument(
        "--unordered", "-u", action="store_true",
        help="Do not use an alphabet; keep words in first-insertion order."
    )
    parser.add_argument(
        "--wordfreq", "-f", default=None, metavar="LANG",
        help="(Optional) Also sort the words of wordfreq's list for LANG (e.g. 'en')."
    )
    parser.add_argument(
        "--limit", "-l", type=int, default=None,
        help="(Optional) Read at most LIMIT words from wordfreq."
    )
    parser.add_argument(
        "--wordnet", "-w", action="store_true",
        help="(Optional) Also sort every WordNet lemma name."
    )
    parser.add_argument(
        "--output", "-o", default=None,
        help="(Optional) Path to write the sorted words to. Defaults to stdout."
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Print debug information to stderr."
    )
    args = parser.parse_args(argv)
    VERBOSE = args.verbose

    input_path = None
    if args.input:
        input_path = os.path.abspath(os.path.expanduser(args.input))
        debug(f"main: Resolved input to '{input_path}'")

    try:
        tokens = read_tokens(input_path)
        alphabet, words = split_alphabet(tokens, args.alphabet, args.unordered)

        if args.wordfreq:
            words.extend(load_wordfreq_words(args.wordfreq, alphabet, args.limit))
        if args.wordnet:
            words.extend(sorted(load_wordnet_words(alphabet)))

        sorted_words = lexical_sort(words, alphabet)
    except (ValueError, CharacterNotInAlphabetError, RuntimeError) as e:
        # InvalidInputError and DuplicateAlphabetCharacterError are ValueErrors
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    debug(f"main: {len(sorted_words)} distinct words sorted")
    if args.output:
        output_path = os.path.abspath(os.path.expanduser(args.output))
        print(f"\n→ Writing sorted words to '{output_path}' …", file=sys.stderr)
        try:
            with open(output_path, "w", encoding="utf-8") as outf:
                for w in sorted_words:
                    outf.write(w + "\n")
        except OSError as e:
            debug(f"main: Caught {type(e).__name__} when writing output: {e}")
            print(f"Error: could not write output file at '{output_path}': {e}", file=sys.stderr)
            sys.exit(1)
    else:
        for w in sorted_words:
            print(w)


if __name__ == "__main__":
    main()
