# Activation functions a neuron gene can name, each with its 3-letter identifier.
# The mutation engine only handles the names; evaluating them is left to
# whoever decodes a genome into a network.
activation_codes = {
    "identity": "IDN",
    "clamped" : "CLP",
    "relu"    : "RLU",
    "sigmoid" : "SIG",
    "tanh"    : "TNH",
    "sin"     : "SIN",
    "gauss"   : "GAU",
    "abs"     : "ABS"
    }

# Names of the activation functions, in a fixed order
activations = tuple(activation_codes)
