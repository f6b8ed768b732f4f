import math

def sigmoid_activation(z, steepness):
    # Split on the sign of the exponent so 'math.exp' never overflows
    x = steepness * z
    if x >= 0.0:
        return 1.0 / (1.0 + math.exp(-x))
    e = math.exp(x)
    return e / (1.0 + e)
