"""
Landmark group names and their indices in the InsightFace 106-point model
"""

OUTER_LIPS = "outer_lips"
LEFT_EYEBROW = "left_eyebrow"
RIGHT_EYEBROW = "right_eyebrow"

# Outer lip contour, walked around the mouth
OUTER_LIPS_106 = (52, 64, 63, 71, 67, 68, 61, 58, 59, 53, 56, 55)

# Upper eyebrow edges, outer end to inner end
LEFT_EYEBROW_106 = (43, 48, 49, 51, 50)
RIGHT_EYEBROW_106 = (102, 103, 104, 105, 101)

LANDMARK_GROUPS_106 = {
    OUTER_LIPS: OUTER_LIPS_106,
    LEFT_EYEBROW: LEFT_EYEBROW_106,
    RIGHT_EYEBROW: RIGHT_EYEBROW_106,
}
