"""
Startup data
Fixed category list plus an optional demo catalog for development
"""
import logging
from typing import List

from models.user import User, UserType
from models.video import Category, Video
from services.storage import MemStorage

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES = [
    {"name": "technology", "display_name": "Tecnologia", "color": "#3A86FF"},
    {"name": "health", "display_name": "Saúde", "color": "#28A745"},
    {"name": "engineering", "display_name": "Engenharia", "color": "#FFC107"},
    {"name": "law", "display_name": "Direito", "color": "#0D47A1"},
    {"name": "education", "display_name": "Educação", "color": "#6A1B9A"},
    {"name": "marketing", "display_name": "Marketing", "color": "#DC3545"},
    {"name": "finance", "display_name": "Finanças", "color": "#198754"},
    {"name": "arts", "display_name": "Artes", "color": "#F44336"},
]

DEMO_PROFESSIONALS = [
    {
        "name": "Ricardo Desenvolvedor",
        "email": "ricardo@example.com",
        "username": "ricardodev",
        "bio": "Desenvolvedor full-stack com 12 anos de experiência em grandes empresas de tecnologia.",
        "experience": 12,
        "profile_image": "https://images.unsplash.com/photo-1568602471122-7832951cc4c5?auto=format&fit=crop&w=300&q=80",
    },
    {
        "name": "Ana Engenheira",
        "email": "ana@example.com",
        "username": "anaeng",
        "bio": "Engenheira civil especializada em projetos sustentáveis e infraestrutura urbana.",
        "experience": 8,
        "profile_image": "https://images.unsplash.com/photo-1573496359142-b8d87734a5a2?auto=format&fit=crop&w=300&q=80",
    },
    {
        "name": "Carlos Médico",
        "email": "carlos@example.com",
        "username": "carlosmed",
        "bio": "Médico cardiologista com experiência em hospitais públicos e privados.",
        "experience": 15,
        "profile_image": "https://images.unsplash.com/photo-1612349317150-e413f6a5b16d?auto=format&fit=crop&w=300&q=80",
    },
]

DEMO_STUDENT = {
    "name": "Maria Estudante",
    "email": "maria@example.com",
    "username": "mariaest",
    "bio": "Estudante universitária buscando definir sua carreira profissional.",
    "profile_image": "https://images.unsplash.com/photo-1494790108377-be9c29b29330?auto=format&fit=crop&w=300&q=80",
}

# (owner index in DEMO_PROFESSIONALS, category name, video fields)
DEMO_VIDEOS = [
    (0, "technology", {
        "title": "Como é trabalhar com tecnologia em grandes empresas",
        "description": "Neste vídeo compartilho minha experiência trabalhando em empresas de tecnologia, desde startups até gigantes do setor. Falo sobre a rotina diária, desafios, projetos e como é a progressão de carreira.",
        "thumbnail_url": "https://images.unsplash.com/photo-1581091226825-a6a2a5aee158?auto=format&fit=crop&w=800&q=80",
        "price": 29.99,
        "duration": 1104,  # 18:24
    }),
    (1, "engineering", {
        "title": "Um dia na vida de um engenheiro civil em canteiro de obras",
        "description": "Acompanhe um dia completo do meu trabalho como engenheira civil em um grande canteiro de obras. Mostro desde as reuniões matinais de planejamento, inspeções de segurança, até os desafios técnicos enfrentados.",
        "thumbnail_url": "https://images.unsplash.com/photo-1541888946425-d81bb19240f5?auto=format&fit=crop&w=800&q=80",
        "price": 24.99,
        "duration": 1520,  # 25:20
    }),
    (2, "health", {
        "title": "Visita ao hospital: rotina de um cardiologista",
        "description": "Neste vídeo você vai conhecer a rotina de um médico cardiologista em um hospital de referência. Mostro consultas, exames, discussões de casos e os desafios da profissão.",
        "thumbnail_url": "https://images.unsplash.com/photo-1579684385127-1ef15d508118?auto=format&fit=crop&w=800&q=80",
        "price": 34.99,
        "duration": 1860,  # 31:00
    }),
    (0, "technology", {
        "title": "Desenvolvimento de aplicativos mobile: bastidores",
        "description": "Compartilho todo o processo de desenvolvimento de aplicativos mobile, desde a concepção da ideia até o lançamento nas lojas. Inclui dicas sobre tecnologias, metodologias e cases reais.",
        "thumbnail_url": "https://images.unsplash.com/photo-1555774698-0b77e0d5fac6?auto=format&fit=crop&w=800&q=80",
        "price": 19.99,
        "duration": 1320,  # 22:00
    }),
]

DEMO_VIDEO_URL = "https://player.vimeo.com/video/565490255"

# (index in DEMO_VIDEOS, stars, comment) purchased and rated by the demo student
DEMO_RATINGS = [
    (0, 5, "Excelente vídeo! Ajudou muito a entender como é o dia a dia na área de desenvolvimento."),
    (2, 4, "Muito informativo sobre a rotina médica. Gostaria de ter visto mais sobre a interação com pacientes."),
]


def seed_categories(storage: MemStorage) -> List[Category]:
    """Create the fixed category list, only if no category exists yet"""
    existing = storage.get_all_categories()
    if existing:
        return existing

    created = [storage.create_category(**data) for data in DEFAULT_CATEGORIES]
    logger.info(f"✅ Seeded {len(created)} categories")
    return created


def seed_demo_data(storage: MemStorage, password_hash: str) -> List[Video]:
    """
    Create demo professionals, a student, videos, purchases and ratings

    Skipped when the store already holds videos.

    Args:
        storage: Store to populate (categories must be seeded first)
        password_hash: Hashed password shared by all demo accounts

    Returns:
        The created videos (empty if skipped)
    """
    if storage.get_all_videos():
        return []

    professionals: List[User] = [
        storage.create_user(password=password_hash, user_type=UserType.PROFESSIONAL, **data)
        for data in DEMO_PROFESSIONALS
    ]
    student = storage.create_user(password=password_hash, user_type=UserType.STUDENT, **DEMO_STUDENT)

    videos = []
    for owner_index, category_name, data in DEMO_VIDEOS:
        category = storage.get_category_by_name(category_name)
        videos.append(storage.create_video(
            video_url=DEMO_VIDEO_URL,
            user_id=professionals[owner_index].id,
            category_id=category.id,
            **data,
        ))

    for video_index, stars, comment in DEMO_RATINGS:
        video = videos[video_index]
        storage.create_purchase(
            user_id=student.id,
            video_id=video.id,
            amount=video.price,
            payment_method="pix",
        )
        storage.create_rating(user_id=student.id, video_id=video.id, rating=stars, comment=comment)

    logger.info(
        f"✅ Demo data initialized: {len(professionals)} professionals, 1 student, {len(videos)} videos"
    )
    return videos
