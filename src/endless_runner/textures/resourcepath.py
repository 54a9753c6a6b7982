ASSETS_PATH: str = "./assets/"
IMAGES_PATH: str = ASSETS_PATH + "images/"
AUDIO_PATH: str = ASSETS_PATH + "audio/"

# Images
BACKGROUND_TEXTURE_PATH: str = IMAGES_PATH + "background.png"
FOREGROUND_TEXTURE_PATH: str = IMAGES_PATH + "foreground.png"
PLAYER_TEXTURE_PATH: str = IMAGES_PATH + "player.png"
OBSTACLE_TEXTURE_PATH: str = IMAGES_PATH + "obstacle.png"

# Sounds
JUMP_SOUND_PATH: str = AUDIO_PATH + "jump.wav"
POWERUP_SOUND_PATH: str = AUDIO_PATH + "powerup.wav"
GAMEOVER_SOUND_PATH: str = AUDIO_PATH + "gameover.wav"

# Registry keys -> paths
IMAGE_ASSETS: dict = {
    "background": BACKGROUND_TEXTURE_PATH,
    "foreground": FOREGROUND_TEXTURE_PATH,
    "player": PLAYER_TEXTURE_PATH,
    "obstacle": OBSTACLE_TEXTURE_PATH,
}

# Only "gameover" is ever played
SOUND_ASSETS: dict = {
    "jump": JUMP_SOUND_PATH,
    "powerupSound": POWERUP_SOUND_PATH,
    "gameover": GAMEOVER_SOUND_PATH,
}
