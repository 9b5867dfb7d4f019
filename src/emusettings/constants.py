from typing import Final

# File layout
CONFIG_DIR_NAME: Final = "config"
CONFIG_FILE_NAME: Final = "config.ini"
FILE_ENCODING: Final = "utf-8"
# Accepts an optional byte order mark on read; writes never add one
FILE_READ_ENCODING: Final = "utf-8-sig"

# Environment overrides for the config location
ENV_CONFIG_FILE: Final = "EMUSETTINGS_CONFIG"
ENV_USER_DIR: Final = "EMUSETTINGS_USER_DIR"

# Section names
SECTION_CORE: Final = "Core"
SECTION_SYSTEM: Final = "System"
SECTION_DATA_STORAGE: Final = "Data Storage"
SECTION_RENDERER: Final = "Renderer"
SECTION_LAYOUT: Final = "Layout"
SECTION_AUDIO: Final = "Audio"

# Core
KEY_USE_CPU_JIT: Final = "use_cpu_jit"
# System
KEY_IS_NEW_3DS: Final = "is_new_3ds"
KEY_SYSTEM_REGION: Final = "region_value"
# Data storage
KEY_USE_VIRTUAL_SD: Final = "use_virtual_sd"
# Renderer
KEY_USE_GLES: Final = "use_gles"
KEY_USE_HW_RENDERER: Final = "use_hw_renderer"
KEY_USE_HW_SHADER: Final = "use_hw_shader"
KEY_USE_SHADER_JIT: Final = "use_shader_jit"
KEY_SHADERS_ACCURATE_MUL: Final = "shaders_accurate_mul"
KEY_SHADERS_ACCURATE_GS: Final = "shaders_accurate_gs"
KEY_RESOLUTION_FACTOR: Final = "resolution_factor"
KEY_USE_FRAME_LIMIT: Final = "use_frame_limit"
KEY_FRAME_LIMIT: Final = "frame_limit"
# Layout
KEY_LAYOUT_OPTION: Final = "layout_option"
# Audio
KEY_ENABLE_DSP_LLE: Final = "enable_dsp_lle"
KEY_AUDIO_STRETCHING: Final = "enable_audio_stretching"
KEY_AUDIO_VOLUME: Final = "volume"
KEY_AUDIO_ENGINE: Final = "output_engine"
KEY_AUDIO_DEVICE: Final = "output_device"

KNOWN_SECTIONS: Final[dict[str, tuple[str, ...]]] = {
    SECTION_CORE: (KEY_USE_CPU_JIT,),
    SECTION_SYSTEM: (KEY_IS_NEW_3DS, KEY_SYSTEM_REGION),
    SECTION_DATA_STORAGE: (KEY_USE_VIRTUAL_SD,),
    SECTION_RENDERER: (
        KEY_USE_GLES,
        KEY_USE_HW_RENDERER,
        KEY_USE_HW_SHADER,
        KEY_USE_SHADER_JIT,
        KEY_SHADERS_ACCURATE_MUL,
        KEY_SHADERS_ACCURATE_GS,
        KEY_RESOLUTION_FACTOR,
        KEY_USE_FRAME_LIMIT,
        KEY_FRAME_LIMIT,
    ),
    SECTION_LAYOUT: (KEY_LAYOUT_OPTION,),
    SECTION_AUDIO: (
        KEY_ENABLE_DSP_LLE,
        KEY_AUDIO_STRETCHING,
        KEY_AUDIO_VOLUME,
        KEY_AUDIO_ENGINE,
        KEY_AUDIO_DEVICE,
    ),
}


def section_for_key(key: str) -> str | None:
    """Return the section a known key lives in, or None for unknown keys."""
    for section, keys in KNOWN_SECTIONS.items():
        if key in keys:
            return section
    return None
