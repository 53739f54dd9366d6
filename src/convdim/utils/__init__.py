from convdim.utils.env import (ConvDimEnv,)

__all__ = ['ConvDimEnv']
