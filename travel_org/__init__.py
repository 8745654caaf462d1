"""여행 조직 시스템 백엔드 패키지.

Travel Organization System package — REST API and server-rendered web front-end.
"""
