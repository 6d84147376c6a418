from .window import VelocityWindow
from .interpolate import PoseInterpolator, interpolate, quartic_ease_in_out
