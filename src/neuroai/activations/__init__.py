"""
Activations Package

This package provides the activation functions applied by network layers.

Exported:
    ActivationFunction: Enumeration of the supported activation functions
    activations:        Dictionary mapping each ActivationFunction to its function
    activate:           Apply an activation function (and optional clamping) to a vector
    Individual activation functions: linear_activation, relu_activation, leaky_relu_activation,
                                     binary_step_activation, sigmoid_activation, tanh_activation,
                                     swish_activation, exponential_activation, softmax_activation,
                                     argmax_activation
"""

from neuroai.activations.basic_activations import (
    ActivationFunction,
    activations,
    activate,
    linear_activation,
    relu_activation,
    leaky_relu_activation,
    binary_step_activation,
    sigmoid_activation,
    tanh_activation,
    swish_activation,
    exponential_activation,
    softmax_activation,
    argmax_activation
)

__all__ = [
    'ActivationFunction',
    'activations',
    'activate',
    'linear_activation',
    'relu_activation',
    'leaky_relu_activation',
    'binary_step_activation',
    'sigmoid_activation',
    'tanh_activation',
    'swish_activation',
    'exponential_activation',
    'softmax_activation',
    'argmax_activation'
]
