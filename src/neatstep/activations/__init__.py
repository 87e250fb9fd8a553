"""
Activations Package

This package provides the nonlinearities a genome can fire its hidden and
output nodes with. A genome picks one of them by name when it is created
and keeps it for its whole lifetime.

Exported:
    activations:      Dictionary mapping activation function names to functions
    activation_codes: Dictionary mapping activation function names to 3-letter codes
    Individual activation functions: identity_activation, clamped_activation,
                                     relu_activation, sigmoid_activation, tanh_activation,
                                     sin_activation, gauss_activation, abs_activation
"""

from neatstep.activations.basic_activations import (
    activations,
    activation_codes,
    identity_activation,
    clamped_activation,
    relu_activation,
    sigmoid_activation,
    tanh_activation,
    sin_activation,
    gauss_activation,
    abs_activation
)

__all__ = [
    'activations',
    'activation_codes',
    'identity_activation',
    'clamped_activation',
    'relu_activation',
    'sigmoid_activation',
    'tanh_activation',
    'sin_activation',
    'gauss_activation',
    'abs_activation'
]
