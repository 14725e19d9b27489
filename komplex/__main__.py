"""
Demo: sample a function, transform it, print the bins.

Run:
    python -m komplex
"""

# ───────────────────────── CONFIGURATION ──────────────────────────────────── #
START         = 0.0              # sampling window
END           = 1.0
STEP          = 1.0 / 16         # 17 grid points, the last one is dropped
FREQUENCY     = 2.0              # Hz of the sampled sine
SHORT_SIGNAL  = [0.0, 1.0, 0.0]  # not a power of two
LOG_FORMAT    = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# ────────────────────────── IMPLEMENTATION ───────────────────────────────── #
import logging
import math

from .fft import dft, fft
from .sampling import sample_math_function, to_complex_list

logger = logging.getLogger("komplex")


def _largest_power_of_two(n: int) -> int:
    return 1 << (n.bit_length() - 1)


def main() -> None:
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)

    samples = sample_math_function(
        START, END, STEP, lambda x: math.sin(2 * math.pi * FREQUENCY * x)
    )
    if not samples:
        logger.error("no samples in [%s, %s] with step %s", START, END, STEP)
        return
    n = _largest_power_of_two(len(samples))
    if n != len(samples):
        logger.info("truncating %d samples to %d", len(samples), n)

    spectrum = fft(to_complex_list(samples[:n]))
    for k, z in enumerate(spectrum):
        print(f"X[{k}] = {z}")

    signal = to_complex_list(SHORT_SIGNAL)
    try:
        result = fft(signal)
    except ValueError as e:
        logger.warning("%s; falling back to the direct DFT", e)
        result = dft(signal)
    print("[" + ", ".join(str(z) for z in result) + "]")


if __name__ == "__main__":
    main()
