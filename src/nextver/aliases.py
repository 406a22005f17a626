from nextver.core.models import EncodingProfile

PROFILE_ALIASES = {
    "10mbps": EncodingProfile.H264_10MBPS,
    "h264": EncodingProfile.H264_10MBPS,
    "48mbps": EncodingProfile.H264_48MBPS,
    "h264-4k": EncodingProfile.H264_48MBPS,
    "prores422": EncodingProfile.PRORES_422,
    "prores": EncodingProfile.PRORES_422,
    "prores444": EncodingProfile.PRORES_444,
}

PROFILE_CHOICES = list(PROFILE_ALIASES.keys())

PROFILE_HELP_TEXT = (
    "Encoding profile written into the filename:\n"
    "  10mbps    : H.264 10 Mbps (1080p), .mp4   (alias: h264)\n"
    "  48mbps    : H.264 48 Mbps (4K+), .mp4     (alias: h264-4k)\n"
    "  prores422 : ProRes 422, .mov              (alias: prores)\n"
    "  prores444 : ProRes 444, .mov\n"
    "Any other identifier is used as-is and exported as .mp4.\n"
    "Default: chosen from --resolution, otherwise 10mbps\n"
)

EPILOG_TEXT = """
Examples:
  Show the next filename for an export folder
  %(prog)s -i ~/Projects/Promo/导出

  Next ProRes 422 export, tagged as colour graded
  %(prog)s -i ~/Projects/Promo/导出 -p prores422 --graded

  Pick the bitrate from the sequence frame size (3840 and up → 48mbps)
  %(prog)s -i ~/Projects/Promo/导出 --resolution 3840x2160

  First export in an empty folder, named after the project file
  %(prog)s -i ~/Projects/Promo/导出 --project "夏日宣传片_2025-08-19.prproj"

  Print only the filename (for scripts)
  %(prog)s -i ~/Projects/Promo/导出 -q
"""
