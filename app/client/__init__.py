"""캡처/추론 클라이언트 (웹캠 → 포즈 → 스윙 감지 → 피드백 릴레이 → 음성 재생)"""
