"""
synapse_sim module: render/colors.py

Central color palette.
"""

BG = (22, 22, 28)
CANVAS = (0, 0, 0)
PANEL = (36, 36, 44)
GRAPH_BG = (44, 44, 52)
TEXT = (235, 235, 235)
TEXT_DIM = (150, 150, 160)

# phases
RESTING = (70, 130, 250)
DEPOLARIZING = (250, 150, 40)
REPOLARIZING = (175, 90, 220)
HYPERPOLARIZING = (60, 215, 230)
FIRING = (235, 60, 60)

# synapse canvas
NEURON = (128, 128, 128)
EPSP = (60, 200, 90)
PULSE = (255, 220, 40)
TRANSMITTER = (255, 220, 40)

# graph
TRACE = (60, 215, 230)
THRESHOLD = (235, 60, 60)

# controls
SUPRA = (60, 200, 90)
SUB = (250, 150, 40)
BUTTON_DISABLED = (80, 80, 88)
BUTTON_OUTLINE = (120, 120, 130)
SLIDER_TRACK = (90, 90, 100)
