from .num_utils import round_half_away, snap_unit, check_channel

__all__ = ["round_half_away", "snap_unit", "check_channel"]
