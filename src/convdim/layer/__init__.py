from convdim.layer.layer import (ConvDimError, InvalidDimension,
                                 InvalidLayerParameter, LayerDescriptor, apply,
                                 check_dim, is_int,)
from convdim.layer.stack import (LayerStack, apply_stack, trace_stack,)

__all__ = ['ConvDimError', 'InvalidDimension', 'InvalidLayerParameter',
           'LayerDescriptor', 'LayerStack', 'apply', 'apply_stack',
           'check_dim', 'is_int', 'trace_stack']
