# Reference conversions of RGB bytes, hue in whole degrees, other components in [0, 1]

samples_rgb_hsv = {
    (0, 0, 0): (0, 0.0, 0.0),
    (255, 255, 255): (0, 0.0, 1.0),
    (128, 128, 128): (0, 0.0, 0.501961),
    (255, 0, 0): (0, 1.0, 1.0),
    (0, 255, 0): (120, 1.0, 1.0),
    (0, 0, 255): (240, 1.0, 1.0),
    (255, 255, 0): (60, 1.0, 1.0),
    (0, 255, 255): (180, 1.0, 1.0),
    (255, 0, 255): (300, 1.0, 1.0),
    (255, 128, 0): (30, 1.0, 1.0),
    (255, 0, 128): (330, 1.0, 1.0),
    (165, 102, 173): (293, 0.410405, 0.678431),
    (236, 229, 219): (35, 0.072034, 0.925490),
    (36, 237, 73): (131, 0.848101, 0.929412),
}

samples_rgb_hsl = {
    (0, 0, 0): (0, 0.0, 0.0),
    (255, 255, 255): (0, 0.0, 1.0),
    (128, 128, 128): (0, 0.0, 0.501961),
    (255, 0, 0): (0, 1.0, 0.5),
    (0, 255, 0): (120, 1.0, 0.5),
    (0, 0, 255): (240, 1.0, 0.5),
    (255, 255, 0): (60, 1.0, 0.5),
    (0, 255, 255): (180, 1.0, 0.5),
    (255, 0, 255): (300, 1.0, 0.5),
    (255, 128, 0): (30, 1.0, 0.5),
    (255, 0, 128): (330, 1.0, 0.5),
    (165, 102, 173): (293, 0.302128, 0.539216),
    (236, 229, 219): (35, 0.309091, 0.892157),
    (36, 237, 73): (131, 0.848101, 0.535294),
}

samples_hsl_hsv = {
    (0, 1.0, 0.5): (0, 1.0, 1.0),
    (0, 0.0, 0.5): (0, 0.0, 0.5),
    (0, 0.0, 0.0): (0, 0.0, 0.0),
    (0, 0.0, 1.0): (0, 0.0, 1.0),
    (120, 0.5, 0.25): (120, 0.666667, 0.375),
    (200, 0.6, 0.8): (200, 0.260870, 0.92),
    (300, 1.0, 0.25): (300, 1.0, 0.5),
}

# full value reads as achromatic in HSL, so pure hues do not invert
samples_hsv_hsl = {
    (0, 1.0, 1.0): (0, 0.0, 0.5),
    (0, 0.5, 1.0): (0, 0.0, 0.75),
    (0, 0.0, 0.5): (0, 0.0, 0.5),
    (0, 0.0, 0.0): (0, 0.0, 0.0),
    (0, 0.0, 1.0): (0, 0.0, 1.0),
    (120, 0.666667, 0.375): (120, 0.5, 0.25),
    (200, 0.260870, 0.92): (200, 0.6, 0.8),
    (300, 1.0, 0.5): (300, 1.0, 0.25),
}
