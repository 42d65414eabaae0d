# constants.py

# --- Conversion Factors ---
LB_TO_KG = 0.453592
IN_TO_MM = 25.4
LBF_TO_N = 4.448

# --- Empirical Formula Coefficients ---
COMPONENTS = ("fork", "shock")
COMPONENT_RATE_FACTORS = {"fork": 0.45, "shock": 0.55}
COMPRESSION_DIVISORS = {"fork": 10.0, "shock": 12.0}
REBOUND_RATIOS = {"fork": 1.2, "shock": 1.15}
DEFAULT_SAG_PERCENT = {"fork": 25.0, "shock": 30.0}
MIN_CLICKS, MAX_CLICKS = 0, 40
PROGRESSIVE_RATE_COEFF = 0.006
CRITICAL_DAMPING_TOLERANCE = 1e-9

# --- Engine Input Limits ---
RIDER_WEIGHT_LIMITS = {"lbs": (40.0, 660.0), "kg": (18.0, 300.0)}
TRAVEL_LIMITS_MM = (10.0, 300.0)

# --- Riding Style Profiles ---
DEFAULT_STYLE = "trail"
STYLE_ALIASES = {"downhill": "dh"}

STYLE_PROFILE_DATA = {
    "xc": {"name": "Cross-Country (XC)", "spring": 1.15, "compression": 1.2, "rebound": 1.1, "sag_front": 20, "sag_rear": 22, "desc": "Efficiency-focused: climbing and endurance on smooth to rolling terrain"},
    "trail": {"name": "Trail Riding", "spring": 1.0, "compression": 1.0, "rebound": 1.0, "sag_front": 25, "sag_rear": 28, "desc": "Balanced: handling and fun on mixed technical terrain"},
    "enduro": {"name": "Enduro Racing", "spring": 0.95, "compression": 0.9, "rebound": 0.95, "sag_front": 28, "sag_rear": 30, "desc": "Aggressive: control and speed on steep, technical terrain"},
    "dh": {"name": "Downhill Racing", "spring": 0.85, "compression": 0.8, "rebound": 0.85, "sag_front": 30, "sag_rear": 33, "desc": "Aggressive-technical: control at the limit on steep, rocky terrain"},
    "casual": {"name": "Casual Riding", "spring": 1.0, "compression": 1.0, "rebound": 1.0, "sag_front": 25, "sag_rear": 27, "desc": "Comfort-focused: smooth, maintained trails"},
    "park": {"name": "Park/Jumps", "spring": 1.0, "compression": 1.0, "rebound": 1.0, "sag_front": 23, "sag_rear": 25, "desc": "Tricks-focused: pop and responsiveness on built features"},
}

STYLE_NOTES = {
    "xc": "XC setup: Stiffer settings for efficiency. Start with recommended values and adjust based on trail feedback.",
    "trail": "Trail setup: Balanced compression and rebound. Great starting point for general trail riding.",
    "enduro": "Enduro setup: Slightly softer for comfort on long descents. Consider adding volume spacers for progression.",
    "dh": "DH setup: Softer damping for small bump compliance. Prepare for adjustments based on terrain.",
}
FALLBACK_NOTE = "Adjust settings based on personal preference and terrain conditions."

STYLE_RECOMMENDATIONS = {
    "xc": ["Focus on minimizing suspension movement on smooth trails", "Use lower compression for better traction while climbing", "Keep rebound fast to maintain pedaling efficiency", "Monitor sag on technical sections"],
    "trail": ["Balance compression and rebound for varied terrain", "Adjust sag based on terrain changes during ride", "Use high-speed compression for larger impacts", "Fine-tune low-speed compression for trail smoothness"],
    "enduro": ["Prioritize support and stability over compliance", "Use higher compression to prevent bottoming on big hits", "Keep rebound fast enough for consecutive impacts", "Increase sag slightly for downhill control"],
    "dh": ["Use firm compression to maintain control at speed", "Balance rebound to handle back-to-back impacts", "Run higher sag for support through big compressions", "Consider coil suspension for consistent feel at speed"],
    "casual": ["Prioritize comfort over performance", "Use lower compression for a plush feel", "Allow more suspension movement", "Focus on smooth, flowing lines"],
    "park": ["Set up for quick rebound to reset between features", "Use lower sag for more pop off jumps", "Balance compression to absorb landings", "Test different settings for tricks you practice"],
}

# Handlebar height change in mm, negative is lower
STYLE_BAR_ADJUST_MM = {"xc": -10, "trail": 0, "enduro": -5, "dh": -15, "casual": 5, "park": 0}

# --- Bike Model Presets ---
BIKE_PRESET_DATA = {
    "hardtail": {"name": "Hardtail Mountain Bike", "fork_travel": 100, "shock_travel": None, "wheel": "29in", "category": "mtb", "fork_type": "air", "shock_type": None, "bike_mass_kg": 12.5, "desc": "Lightweight bike optimized for efficiency and climbing"},
    "trailMTB": {"name": "Trail Mountain Bike", "fork_travel": 140, "shock_travel": 130, "wheel": "29in", "category": "mtb", "fork_type": "air", "shock_type": "air", "bike_mass_kg": 13.5, "desc": "Balanced suspension for technical descents and climbing"},
    "enduroMTB": {"name": "Enduro Mountain Bike", "fork_travel": 160, "shock_travel": 150, "wheel": "29in", "category": "mtb", "fork_type": "air", "shock_type": "air", "bike_mass_kg": 14.0, "desc": "Long travel suspension optimized for descents"},
    "downhillMTB": {"name": "Downhill Mountain Bike", "fork_travel": 200, "shock_travel": 200, "wheel": "27.5in", "category": "mtb", "fork_type": "coil", "shock_type": "coil", "bike_mass_kg": 15.5, "desc": "Maximum suspension travel for extreme conditions"},
    "gravelBike": {"name": "Gravel Bike", "fork_travel": 40, "shock_travel": None, "wheel": "700c", "category": "gravel", "fork_type": "elastomer", "shock_type": None, "bike_mass_kg": 11.0, "desc": "Lightweight bike for mixed terrain"},
    "parkBike": {"name": "Park/Slopestyle Bike", "fork_travel": 180, "shock_travel": 170, "wheel": "27.5in", "category": "mtb", "fork_type": "air", "shock_type": "air", "bike_mass_kg": 14.5, "desc": "Optimized for jumps and technical features"},
    "eMTB": {"name": "E-Mountain Bike", "fork_travel": 150, "shock_travel": 140, "wheel": "29in", "category": "emtb", "fork_type": "air", "shock_type": "air", "bike_mass_kg": 23.0, "desc": "Suspension tuned for heavier overall weight"},
}

# Travel each frame is designed around (min, max) in mm; None on a hardtail rear
BIKE_TRAVEL_RANGES = {
    "hardtail": {"fork": (80, 150), "shock": None},
    "trailMTB": {"fork": (120, 160), "shock": (110, 150)},
    "enduroMTB": {"fork": (150, 180), "shock": (140, 170)},
    "downhillMTB": {"fork": (180, 220), "shock": (180, 220)},
    "gravelBike": {"fork": (20, 60), "shock": None},
    "parkBike": {"fork": (160, 200), "shock": (150, 190)},
    "eMTB": {"fork": (130, 170), "shock": (120, 160)},
}

BIKE_PURPOSES = {
    "hardtail": "Cross-country and trail riding",
    "trailMTB": "All-mountain trail riding",
    "enduroMTB": "Aggressive downhill riding with climbing capability",
    "downhillMTB": "Downhill racing and aggressive terrain",
    "gravelBike": "Off-road and adventure riding",
    "parkBike": "Park riding and slopestyle courses",
    "eMTB": "Trail riding with motor assistance",
}

# --- Bike + Style Combinations ---
PRESET_COMBINATION_DATA = {
    "hardtail-xc": {"name": "Hardtail XC", "bike": "hardtail", "style": "xc", "desc": "Lightweight cross-country hardtail setup"},
    "trail-mtb-trail": {"name": "Trail MTB - Trail Riding", "bike": "trailMTB", "style": "trail", "desc": "Balanced trail bike for technical riding"},
    "trail-mtb-enduro": {"name": "Trail MTB - Enduro Racing", "bike": "trailMTB", "style": "enduro", "desc": "Aggressive settings on trail bike"},
    "enduro-mtb-enduro": {"name": "Enduro MTB - Enduro Racing", "bike": "enduroMTB", "style": "enduro", "desc": "Race-ready enduro configuration"},
    "downhill-mtb-downhill": {"name": "Downhill MTB - DH Racing", "bike": "downhillMTB", "style": "dh", "desc": "Full-send downhill race setup"},
    "park-bike-park": {"name": "Park Bike - Park/Jumps", "bike": "parkBike", "style": "park", "desc": "Park and jump optimized setup"},
    "emtb-trail": {"name": "E-MTB - Trail Riding", "bike": "eMTB", "style": "trail", "desc": "E-bike tuned for trail use"},
}
