# controlmath/constants.py

# Capacity used by MovingAverageFilter when none (or 0) is given
DEFAULT_SMOOTHING_FACTOR = 2

# MIDI note number of A4 and its reference pitch in Hz
A4_MIDI_NOTE = 69
A4_FREQUENCY_HZ = 440.0

# Equal temperament: semitones per doubling of frequency
SEMITONES_PER_OCTAVE = 12

# Amplitude ratio -> dB multiplier (20 * log10)
DECIBELS_PER_DECADE = 20.0

# Default probability of coin() returning 1
DEFAULT_COIN_ODDS = 0.5

# Logging
LOG_FORMAT = "%(asctime)s [%(levelname)-5s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
CONSOLE_LOG_LEVEL = "INFO"

# Decimal digits of working precision for prune() (covers 21 integer digits plus 100 fraction digits)
PRUNE_PRECISION = 130
