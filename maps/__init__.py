from maps.level_base import LevelMap
from maps.gallery1_map import Gallery1Map
