def lerp(start, stop, amount):
    return start + (stop - start) * amount


def constrain(value, low, high):
    return max(low, min(high, value))


def map_range(value, in_min, in_max, out_min, out_max, clamp=False):
    """Linearly re-map ``value`` from one range to another.

    Either range may be reversed. With ``clamp`` the result is held inside
    the output range.
    """
    if in_max == in_min:
        return out_min
    result = out_min + (value - in_min) * (out_max - out_min) / (in_max - in_min)
    if clamp:
        return constrain(result, min(out_min, out_max), max(out_min, out_max))
    return result
