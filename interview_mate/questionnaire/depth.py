"""In-depth interview questionnaire for senior and returning candidates."""

from interview_mate.models.interview import InterviewType
from interview_mate.questionnaire.models import (
    Question,
    Questionnaire,
    Section,
    Stage,
)

DEPTH_QUESTIONNAIRE = Questionnaire(
    interview_type=InterviewType.DEPTH,
    stages=(
        Stage(
            id="d-background",
            title="1. 배경",
            sections=(
                Section(
                    id="d-bg-career",
                    title="경력 흐름",
                    questions=(
                        Question(
                            id="d-q-career-1",
                            text="지금까지의 경력을 시간 순서대로 설명해주세요.",
                            checkpoints=("근속 기간", "이직 사유"),
                        ),
                        Question(
                            id="d-q-career-2",
                            text="가장 성장했다고 느낀 시기는 언제였나요?",
                            checkpoints=("자기 인식", "성장 의지"),
                        ),
                    ),
                ),
                Section(
                    id="d-bg-notice",
                    title="심층 면접 안내",
                    notices=(
                        "심층 면접 내용은 채용 결정에 참고됩니다.",
                        "답변 내용은 면접관 외에 공유되지 않습니다.",
                    ),
                ),
            ),
        ),
        Stage(
            id="d-skills",
            title="2. 실무 역량",
            sections=(
                Section(
                    id="d-skills-sushi",
                    title="스시 실무 심화",
                    condition="hasSushiExperience === true",
                    questions=(
                        Question(
                            id="d-q-sushi-1",
                            text="생선 손질과 재고 관리 경험을 구체적으로 설명해주세요.",
                            checkpoints=("손질 기술", "재고 회전", "원가 의식"),
                        ),
                        Question(
                            id="d-q-sushi-2",
                            text="신규 직원에게 롤 제작을 가르쳐본 경험이 있나요?",
                            checkpoints=("교육 능력", "표준화"),
                        ),
                    ),
                ),
                Section(
                    id="d-skills-ops",
                    title="매장 운영",
                    questions=(
                        Question(
                            id="d-q-ops-1",
                            text="매장 오픈 또는 마감 절차를 책임진 경험이 있나요?",
                            checkpoints=("운영 이해도", "체크리스트"),
                        ),
                        Question(
                            id="d-q-ops-2",
                            text="인력이 부족한 날 매장을 어떻게 운영했나요?",
                            checkpoints=("문제 해결", "우선순위"),
                        ),
                    ),
                ),
            ),
        ),
        Stage(
            id="d-leadership",
            title="3. 리더십",
            sections=(
                Section(
                    id="d-lead-people",
                    title="사람 관리",
                    questions=(
                        Question(
                            id="d-q-lead-1",
                            text="성과가 낮은 팀원을 어떻게 지도했나요?",
                            checkpoints=("피드백", "코칭"),
                        ),
                        Question(
                            id="d-q-lead-2",
                            text="팀 분위기를 개선했던 사례가 있나요?",
                            checkpoints=("조직 문화", "주도성"),
                        ),
                    ),
                ),
            ),
        ),
        Stage(
            id="d-closing",
            title="4. 종합",
            sections=(
                Section(
                    id="d-closing-summary",
                    title="종합 평가",
                    questions=(
                        Question(
                            id="d-q-close-1",
                            text="장기적인 커리어 목표는 무엇인가요?",
                            checkpoints=("비전", "회사와의 방향성"),
                        ),
                        Question(
                            id="d-q-close-2",
                            text="면접관 종합 메모",
                            checkpoints=("채용 의견", "배치 제안"),
                        ),
                    ),
                ),
            ),
        ),
    ),
)
