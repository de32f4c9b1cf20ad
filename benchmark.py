import numpy as np
from online_suffix_tree import SuffixTree
from online_suffix_tree.python_backend.naive_repeats import naive_longest_repeated_substring
import time
from typing import List, Tuple
import pandas as pd
import matplotlib.pyplot as plt
import seaborn as sns

def sample_strings_numpy(n: int, length: int, alphabet: str = '01') -> List[str]:
    """Generate n random strings of given length over alphabet"""
    return [''.join(np.random.choice(list(alphabet), length)) for _ in range(n)]

def run_benchmark(n_strings: int, string_length: int, alphabet: str, with_naive: bool) -> Tuple[float, float, float]:
    """Return total build time, LRS query time and naive LRS time (nan if skipped)"""
    strings = sample_strings_numpy(n_strings, string_length, alphabet)

    start_time = time.perf_counter()
    trees = [SuffixTree(s) for s in strings]
    build_time = time.perf_counter() - start_time

    start_time = time.perf_counter()
    for tree in trees:
        tree.longest_repeated_substring()
    query_time = time.perf_counter() - start_time

    naive_time = float('nan')
    if with_naive:
        start_time = time.perf_counter()
        for s in strings:
            naive_longest_repeated_substring(s)
        naive_time = time.perf_counter() - start_time

    return build_time, query_time, naive_time

def main():
    # Test parameters
    string_lengths = [100, 1_000, 10_000, 100_000]
    alphabets = {'binary': '01', 'dna': 'ACGT', 'letters': 'abcdefghijklmnopqrstuvwxyz'}
    n_strings = 5
    naive_max_length = 1_000  # Brute force is far too slow beyond this

    results = []

    try:
        for alphabet_name, alphabet in alphabets.items():
            for string_length in string_lengths:
                print(f"Testing: {n_strings} {alphabet_name} strings of length {string_length}")
                build_time, query_time, naive_time = run_benchmark(
                    n_strings, string_length, alphabet, with_naive=string_length <= naive_max_length)
                results.append({
                    'alphabet': alphabet_name,
                    'string_length': string_length,
                    'build_time': build_time / n_strings,
                    'query_time': query_time / n_strings,
                    'naive_time': naive_time / n_strings,
                    'chars_per_second': n_strings * string_length / build_time,
                })

        df = pd.DataFrame(results)
        df.to_csv('benchmark_results.csv', index=False)

        # Linear construction shows up as a flat chars/second curve.
        print("\nBenchmark Summary:")
        print("=================")
        for alphabet_name in alphabets:
            data = df[df['alphabet'] == alphabet_name]
            print(f"\nAlphabet: {alphabet_name}")
            for _, row in data.iterrows():
                print(f"  length {row['string_length']:>7}: build {row['build_time']:.4f}s, "
                      f"LRS {row['query_time']:.4f}s, {row['chars_per_second']:.0f} chars/second")

        sns.set_theme(style='whitegrid')
        plt.figure(figsize=(12, 6))

        plt.subplot(1, 2, 1)
        sns.lineplot(data=df, x='string_length', y='build_time', hue='alphabet', marker='o')
        plt.xscale('log')
        plt.yscale('log')
        plt.xlabel('String Length')
        plt.ylabel('Build Time per String (s)')
        plt.title('Construction Time vs Length')

        plt.subplot(1, 2, 2)
        sns.lineplot(data=df, x='string_length', y='chars_per_second', hue='alphabet', marker='o')
        plt.xscale('log')
        plt.xlabel('String Length')
        plt.ylabel('Characters per Second')
        plt.title('Construction Throughput')

        plt.tight_layout()
        plt.savefig('benchmark_results.png', dpi=300, bbox_inches='tight')
        plt.close()

    except KeyboardInterrupt:
        print("\nBenchmark interrupted by user.")

if __name__ == '__main__':
    main()
