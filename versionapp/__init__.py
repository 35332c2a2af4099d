# 빌드 파이프라인이 표시용 버전 문자열을 기록하는 자리 (비어 있으면 패키지 메타데이터 사용)
__version__ = ""
