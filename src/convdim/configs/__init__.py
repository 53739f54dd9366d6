from convdim.configs.log import (Color, Loggable,)
from convdim.configs.stack import (ConfigParseError, LayerConfig, StackConfig,)

__all__ = ['Color', 'ConfigParseError', 'LayerConfig', 'Loggable',
           'StackConfig']
