# 순환 import 방지를 위해 여기서는 재노출하지 않음 (systems.xxx 로 직접 import)
