"""
Simulation tuning knobs.
"""

# Membrane potentials (mV)
RESTING_POTENTIAL = -70.0
THRESHOLD_POTENTIAL = -55.0
PEAK_POTENTIAL = 40.0
HYPERPOLARIZATION_DEPTH = 10.0  # undershoot below rest before recovery

# Buffers
HISTORY_LENGTH = 200
TRANSMITTER_BATCH = 10

# Firing sequence timings (seconds)
DEPOLARIZE_DURATION = 0.2
PROPAGATION_DURATION = 0.5
REPOLARIZE_DURATION = 0.3
RECOVERY_DURATION = 0.4

# Sub-threshold transient timings (seconds)
FAILED_RISE_DURATION = 0.1
FAILED_HOLD_DURATION = 0.2
FAILED_DECAY_DURATION = 0.2

# Synaptic release timings (seconds)
DIFFUSION_DELAY = 0.05
EPSP_RISE_DURATION = 0.6
EPSP_DWELL = 0.8
EPSP_FADE_DURATION = 0.5

# Stimulus slider
STIMULUS_MIN = 0.0
STIMULUS_MAX = 100.0
STIMULUS_STEP = 1.0
STIMULUS_DEFAULT = 20.0

# Environment
SCREEN_W, SCREEN_H = 720, 640
FPS = 60

# Graph range (mV)
GRAPH_V_MIN = -80.0
GRAPH_V_MAX = 40.0

# Logging
LOG_LEVEL = "INFO"
