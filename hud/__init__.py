from hud.vision_hud import VisionHud
