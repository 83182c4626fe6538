"""Standard interview questionnaire."""

from interview_mate.models.interview import InterviewType
from interview_mate.questionnaire.models import (
    Question,
    Questionnaire,
    Section,
    Stage,
)

STANDARD_QUESTIONNAIRE = Questionnaire(
    interview_type=InterviewType.STANDARD,
    stages=(
        Stage(
            id="s-intro",
            title="1. 도입 및 근무 조건",
            sections=(
                Section(
                    id="s-intro-icebreak",
                    title="아이스브레이킹",
                    questions=(
                        Question(
                            id="s-q-intro-1",
                            text="간단하게 자기소개 부탁드립니다.",
                            checkpoints=("첫인상", "의사소통"),
                        ),
                        Question(
                            id="s-q-intro-2",
                            text="저희 매장에 지원하게 된 계기는 무엇인가요?",
                            checkpoints=("지원 동기", "브랜드 이해도"),
                        ),
                    ),
                ),
                Section(
                    id="s-intro-conditions",
                    title="근무 가능 조건",
                    questions=(
                        Question(
                            id="s-q-cond-1",
                            text="현재 비자 종류와 만료일을 확인해주세요.",
                            checkpoints=("비자 종류", "만료일", "근무 시간 제한"),
                        ),
                        Question(
                            id="s-q-cond-2",
                            text="주당 근무 가능한 시간과 요일은 언제인가요?",
                            checkpoints=("주말 근무", "최소 근무 시간"),
                        ),
                        Question(
                            id="s-q-cond-3",
                            text="언제부터 근무를 시작할 수 있나요?",
                            checkpoints=("시작 가능일",),
                        ),
                    ),
                ),
                Section(
                    id="s-intro-notice",
                    title="근무 조건 안내",
                    notices=(
                        "수습 기간 동안 근무 평가가 진행됩니다.",
                        "근무 스케줄은 매주 매니저가 공지합니다.",
                        "위생 교육 이수는 근무 시작 전 필수입니다.",
                    ),
                ),
            ),
        ),
        Stage(
            id="s-experience",
            title="2. 경력 및 역량",
            sections=(
                Section(
                    id="s-exp-sushi",
                    title="스시 경력",
                    condition="hasSushiExperience === true",
                    questions=(
                        Question(
                            id="s-q-sushi-1",
                            text="이전 매장에서 담당했던 업무를 구체적으로 설명해주세요.",
                            checkpoints=("롤 제작", "니기리", "준비 업무"),
                        ),
                        Question(
                            id="s-q-sushi-2",
                            text="시간당 처리 가능한 롤의 양은 어느 정도였나요?",
                            checkpoints=("속도", "정확성"),
                        ),
                        Question(
                            id="s-q-sushi-3",
                            text="밥 짓기와 초대리 배합 경험이 있나요?",
                            checkpoints=("밥 관리", "레시피 준수"),
                        ),
                    ),
                ),
                Section(
                    id="s-exp-new",
                    title="신입 지원자",
                    condition="hasSushiExperience === false",
                    questions=(
                        Question(
                            id="s-q-new-1",
                            text="요식업 또는 서비스업 경험이 있다면 말씀해주세요.",
                            checkpoints=("서비스 경험", "고객 응대"),
                        ),
                        Question(
                            id="s-q-new-2",
                            text="새로운 업무를 빠르게 배웠던 경험이 있나요?",
                            checkpoints=("학습 태도", "적응력"),
                        ),
                    ),
                ),
                Section(
                    id="s-exp-general",
                    title="공통 역량",
                    questions=(
                        Question(
                            id="s-q-gen-1",
                            text="바쁜 피크 시간에 어떻게 우선순위를 정하나요?",
                            checkpoints=("멀티태스킹", "침착함"),
                        ),
                        Question(
                            id="s-q-gen-2",
                            text="위생 및 식품 안전을 위해 지켜온 습관이 있나요?",
                            checkpoints=("위생 의식", "식품 안전"),
                        ),
                    ),
                ),
            ),
        ),
        Stage(
            id="s-attitude",
            title="3. 태도 및 조직 적합성",
            sections=(
                Section(
                    id="s-att-team",
                    title="팀워크",
                    questions=(
                        Question(
                            id="s-q-team-1",
                            text="동료와 의견이 맞지 않았을 때 어떻게 해결했나요?",
                            checkpoints=("갈등 해결", "소통"),
                        ),
                        Question(
                            id="s-q-team-2",
                            text="팀을 위해 본인의 역할 이상을 했던 경험이 있나요?",
                            checkpoints=("책임감", "협동심"),
                        ),
                    ),
                ),
                Section(
                    id="s-att-customer",
                    title="고객 응대",
                    questions=(
                        Question(
                            id="s-q-cust-1",
                            text="불만 고객을 응대했던 경험을 말씀해주세요.",
                            checkpoints=("고객 중심", "감정 조절"),
                        ),
                    ),
                ),
            ),
        ),
        Stage(
            id="s-closing",
            title="4. 마무리",
            sections=(
                Section(
                    id="s-closing-questions",
                    title="질의응답",
                    questions=(
                        Question(
                            id="s-q-close-1",
                            text="회사나 업무에 대해 궁금한 점이 있나요?",
                            checkpoints=("관심도",),
                        ),
                        Question(
                            id="s-q-close-2",
                            text="면접관 종합 메모",
                            checkpoints=("채용 의견",),
                        ),
                    ),
                ),
                Section(
                    id="s-closing-policy",
                    title="회사 정책 안내",
                    notices=(
                        "급여는 2주 단위로 지급됩니다.",
                        "유니폼은 매장에서 지급되며 퇴사 시 반납합니다.",
                        "개인정보는 채용 목적에 한해 보관됩니다.",
                    ),
                ),
            ),
        ),
    ),
)
