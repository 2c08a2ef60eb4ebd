import numpy as np
from enum import Enum

class ActivationFunction(Enum):
    """
    The transforms a layer can apply to its output vector.
    Each one maps a whole vector to a vector of the same length.
    """
    LINEAR                 = "linear"
    RECTIFIED_LINEAR       = "relu"
    LEAKY_RECTIFIED_LINEAR = "leaky_relu"
    BINARY_STEP            = "binary_step"
    SIGMOID                = "sigmoid"
    TANH                   = "tanh"
    SWISH                  = "swish"
    ARGMAX                 = "argmax"
    SOFTMAX                = "softmax"

def linear_activation(z):
    return z

def relu_activation(z):
    return np.maximum(0.0, z)

def leaky_relu_activation(z):
    return np.where(z > 0.0, z, 0.01 * z)

def binary_step_activation(z):
    return np.where(z >= 0.0, 1.0, 0.0)

def sigmoid_activation(z):
    Z = np.clip(z, -500, 500)   # to prevent overflow when calculating exp
    return 1.0 / (1.0 + np.exp(-Z))

def tanh_activation(z):
    return np.tanh(z)

def swish_activation(z):
    return z * sigmoid_activation(z)

def exponential_activation(z):
    return np.exp(z)

def softmax_activation(z):
    # Shifting by the maximum leaves the ratios unchanged and keeps exp finite
    if z.size == 0:
        return z
    exp = exponential_activation(z - np.max(z))
    return exp / np.sum(exp)

def argmax_activation(z):
    # The index of the winner, repeated in every output slot
    if z.size == 0:
        return z
    return np.full(z.shape, float(np.argmax(z)))

activations = {
    ActivationFunction.LINEAR                : linear_activation,
    ActivationFunction.RECTIFIED_LINEAR      : relu_activation,
    ActivationFunction.LEAKY_RECTIFIED_LINEAR: leaky_relu_activation,
    ActivationFunction.BINARY_STEP           : binary_step_activation,
    ActivationFunction.SIGMOID               : sigmoid_activation,
    ActivationFunction.TANH                  : tanh_activation,
    ActivationFunction.SWISH                 : swish_activation,
    ActivationFunction.ARGMAX                : argmax_activation,
    ActivationFunction.SOFTMAX               : softmax_activation
    }

def activate(values, activation: ActivationFunction, clamped: bool = False) -> np.ndarray:
    """
    Apply an activation function to a whole vector of node outputs.

    Parameters:
        values:     the raw node outputs of a layer
        activation: which transform to apply
        clamped:    if True, every element of the result is clamped to [-1, 1]

    Returns:
        a new float vector of the same length as 'values'
    """
    z = np.asarray(values, dtype=np.float64)
    output = activations[ActivationFunction(activation)](z)
    if clamped:
        output = np.clip(output, -1.0, 1.0)
    return output
