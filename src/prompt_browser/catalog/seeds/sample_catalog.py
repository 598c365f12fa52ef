"""
Built-in sample catalog for the Prompt Browser.

Used when CATALOG_PATH is not configured. Entries under the
"0. 실습파일, 교재" large category are downloadable resources; everything
else is a copyable prompt.
"""

SAMPLE_CATALOG = [
    {
        "id": "resource-1",
        "largeCategory": "0. 실습파일, 교재",
        "mediumCategory": "실습파일",
        "content": "실습에 사용하는 데이터 파일 전체를 내려받습니다.",
        "prompt": "",
    },
    {
        "id": "resource-2",
        "largeCategory": "0. 실습파일, 교재",
        "mediumCategory": "교재",
        "content": "교육 교재(PDF)를 내려받습니다.",
        "prompt": "",
    },
    {
        "id": "basics-1",
        "largeCategory": "1. 데이터 이해",
        "mediumCategory": "데이터 구조 파악",
        "smallCategory": "컬럼 설명",
        "content": "업로드한 데이터의 컬럼 구성과 의미를 정리합니다.",
        "prompt": "첨부한 데이터의 각 컬럼 이름, 자료형, 의미를 표로 정리해줘.",
    },
    {
        "id": "basics-2",
        "largeCategory": "1. 데이터 이해",
        "mediumCategory": "데이터 구조 파악",
        "smallCategory": "결측치 확인",
        "content": "컬럼별 결측치 비율을 확인합니다.",
        "prompt": "각 컬럼의 결측치 개수와 비율을 계산하고 처리 방법을 제안해줘.",
    },
    {
        "id": "basics-3",
        "largeCategory": "1. 데이터 이해",
        "mediumCategory": "기초 통계",
        "smallCategory": "요약 통계량",
        "content": "",
        "prompt": "수치형 컬럼의 평균, 중앙값, 표준편차, 최솟값, 최댓값을 알려줘.",
    },
    {
        "id": "viz-1",
        "largeCategory": "2. 시각화",
        "mediumCategory": "분포 시각화",
        "smallCategory": "히스토그램",
        "content": "수치형 변수의 분포를 히스토그램으로 확인합니다.",
        "prompt": "주요 수치형 컬럼별 히스토그램을 그려줘.",
    },
    {
        "id": "viz-2",
        "largeCategory": "2. 시각화",
        "mediumCategory": "추세 시각화",
        "content": "시계열 데이터의 추세를 선 그래프로 표현합니다.",
        "prompt": "날짜 컬럼 기준으로 월별 추세를 선 그래프로 그려줘.",
    },
    {
        "id": "report-1",
        "largeCategory": "3. 보고서 작성",
        "content": "분석 결과를 보고서 형식으로 정리합니다.",
        "prompt": "지금까지의 분석 결과를 임원 보고용 1페이지 요약으로 작성해줘.",
    },
]
